# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0

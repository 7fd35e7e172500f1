# SPDX-FileCopyrightText: 2024 Robin Vobruba <hoijui.quaero@gmail.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any

# a decoded JSON/YAML object
RecDict = dict[str, Any]

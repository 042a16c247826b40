# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Classification happens in two steps:
# step 1: screen the modifier mask, dropping the device-dependent low bits
# step 2: compare the screened mask (exactly, or as a superset) and the key code or character

#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the keymaker package."

name = "keymaker"
__version__ = "2026.10.1"
__author__ = "The keymaker developers"
__author_email__ = "devs@keymaker.dev"
__copyright__ = "Copyright (C) 2021-2026 The keymaker developers"
__license__ = "MIT License"

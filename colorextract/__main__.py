# Copyright (c) 2026 Colorextract
# SPDX-License-Identifier: MIT

import sys

from colorextract.cli import main

sys.exit(main())

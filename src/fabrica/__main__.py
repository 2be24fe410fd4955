# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import sys

from .demo import main

sys.exit(main())

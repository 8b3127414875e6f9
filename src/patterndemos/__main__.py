# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

from __future__ import annotations

import sys

from .cli import main


sys.exit(main())

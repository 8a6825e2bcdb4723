# MIT License (see LICENSE)
from .cli import main

raise SystemExit(main())

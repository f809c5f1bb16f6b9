"""
Точка входа для запуска модуля.

Позволяет запускать утилиту как:
    python -m ipam_source [команда] [опции]

Примеры:
    python -m ipam_source refresh
    python -m ipam_source refresh --file ./interfaces.json
    python -m ipam_source show-interfaces --format json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

# src/usdnis/__main__.py
"""Allow running the converter with python -m usdnis."""

from usdnis.app import main

main()

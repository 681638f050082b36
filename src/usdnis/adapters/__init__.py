# src/usdnis/adapters/__init__.py
"""
Adapters Layer - External Integrations

This package contains adapters for external systems:
- HTTP transport with retry
- Bank of Israel rate providers
- Output formatting
"""

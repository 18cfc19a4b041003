# itemguard/items/__init__.py
"""
Items Package.
Item records (simple items and containers), the factory, and the slot inventory.
"""

"""storefront: a text-menu retail simulation.

Browse a small catalog of electronics, clothing and groceries, build an
order across categories with a 10% bulk discount on lines of ten or more,
check out, and return products back into stock. Everything lives in memory
for the length of one session.

Usage:
    python -m storefront shop                        # Interactive session
    python -m storefront catalog                     # Show catalog and stock
"""

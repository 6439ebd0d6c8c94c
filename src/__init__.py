"""
Storefront Catalog API
"""

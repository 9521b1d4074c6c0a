"""Product Catalog package.

This package is organized by feature modules (users, products, security, ...)
with a thin Flask controller layer over service/repository layers.
"""

__version__ = "0.1.0"

"""
Product service for catalog reads.
"""
from apps.common.exceptions import NotFound
from apps.common.utils import parse_positive_int
from ..models import Product


class ProductService:
    """Read-only catalog access"""

    @staticmethod
    def list_catalog():
        """Return in-stock products in catalog order"""
        return Product.in_stock_items.all()

    @staticmethod
    def get_product(product_id):
        """
        Fetch a product by id.

        Stock is not checked here: an existing order may reference a product
        that has since gone out of stock.

        Raises:
            NotFound: If no product has this id
        """
        pk = parse_positive_int(product_id)
        product = Product.objects.filter(pk=pk).first() if pk else None
        if product is None:
            raise NotFound('Product not found')
        return product

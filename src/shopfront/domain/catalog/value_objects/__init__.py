from shopfront.domain.catalog.value_objects.price import quantize_price
from shopfront.domain.catalog.value_objects.slug import Slug

__all__ = ["Slug", "quantize_price"]

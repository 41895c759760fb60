import sys
import argparse
from typing import Any, Dict, List

from . import JSCoder, Options, properties_for_coding, attrs_with_coding

# Models

@properties_for_coding('title')
class Product:
    def __init__(self, title:str) -> None:
        self.title = title

@properties_for_coding('products', 'config')
class Shelf:
    def __init__(self) -> None:
        self.products = [Product("Apple"), Product("Orange"), Product("Banana")]
        self.config: Dict[str, Any] = {
            'tint_color': "#ff4400",
            'height': 123,
            'default_product': self.products[1],
        }

@properties_for_coding('highlighted_products', 'main_shelf')
class Shop:
    def __init__(self) -> None:
        self.main_shelf = Shelf()
        self.highlighted_products: List[Product] = self.main_shelf.products[0:2]

# Controllers

@attrs_with_coding
class HighlightsController:
    delegate: object = None

@properties_for_coding('shop', 'highlights_controller', 'delegate', 'struct')
class ShopController:
    def __init__(self) -> None:
        self.shop = Shop()
        # cycle with an intermediate object
        self.highlights_controller = HighlightsController(delegate=self)
        # cycle with a single object
        self.delegate = self
        self.struct = {'a': ['foo', 'bar', self, self.shop]}

def main() -> None:
    parser = argparse.ArgumentParser(description='Playground frontend for the library: '
                                     'prints the javascript encoding of a demo object graph.',
                                     prog='python3 -m roaster',
                                     formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-v', '--verbose', dest='verbosity', action='count', help='increase verbosity', )
    parser.add_argument('--indent', default='', help='prefix of each generated statement')
    parser.add_argument('--primitives', action='store_true', help='also encode some primitive values and simple structures')

    args = parser.parse_args()
    options = Options(verbosity=args.verbosity or 0, indent=args.indent, outstream=sys.stderr)

    print(JSCoder(ShopController(), options=options).javascript_function())

    if args.primitives:
        for value in (None, True, False, 123.23, "string", ['foo', 'bar'], {'a': ['foo', 'bar']}):
            print(JSCoder(value, options=options).javascript_function())

if __name__ == "__main__":
    main()

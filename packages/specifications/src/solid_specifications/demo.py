#!/usr/bin/env python
"""Demo: filtering a product catalog with composable specifications."""

from __future__ import annotations

import logging

from .catalog import Color, ColorSpecification, Product, Size, SizeSpecification
from .filtering import SpecificationFilter


def build_catalog() -> list[Product]:
    return [
        Product(name="Apple", color=Color.GREEN, size=Size.SMALL),
        Product(name="Tree", color=Color.GREEN, size=Size.LARGE),
        Product(name="House", color=Color.BLUE, size=Size.LARGE),
    ]


def main() -> None:
    products = build_catalog()
    pf: SpecificationFilter[Product] = SpecificationFilter()

    print("Green products:")
    for p in pf.filter(products, ColorSpecification(Color.GREEN)):
        print(f" - {p.name} is green")

    print("Large products:")
    for p in pf.filter(products, SizeSpecification(Size.LARGE)):
        print(f" - {p.name} is large")

    # A new criterion is just a new composite; the filter is untouched.
    print("Large blue products:")
    big_and_blue = ColorSpecification(Color.BLUE) & SizeSpecification(Size.LARGE)
    for p in pf.filter(products, big_and_blue):
        print(f" - {p.name} is big and blue")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()

"""Run the product-archiver command line tool with `python -m product_archiver`."""

from product_archiver.tool.product_archiver import main

if __name__ == "__main__":
    main()

"""Services: the logic behind `product` and `print-file`, free of console I/O."""

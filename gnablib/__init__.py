"""IPv4 and CIDR helpers, a merging IPv4 tree, and RIPEMD and Whirlpool hashes."""

__version__ = "0.1.0"
__all__ = ["ipv4", "iptree", "ripemd", "whirlpool", "whirlpool_tables"]
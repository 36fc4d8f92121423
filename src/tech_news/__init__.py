"""Tech News: a link-sharing site with comments and upvotes."""

__version__ = "0.1.0"

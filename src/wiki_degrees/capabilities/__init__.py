from .link_lookup import ILinkLookup

__all__ = ["ILinkLookup"]

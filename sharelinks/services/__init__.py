from sharelinks.services.share_service import ShareService


__all__ = ['ShareService']

from portal.middlewares.portal_middleware import PortalMiddleware

__all__ = ["PortalMiddleware"]

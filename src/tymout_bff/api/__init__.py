from tymout_bff.api.app import create_app, router

__all__ = ["create_app", "router"]

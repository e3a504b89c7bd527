from notedesk.presentation.cli.app import app

__all__ = ["app"]

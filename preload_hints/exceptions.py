# Base Exception
class PreloadHintsError(Exception):
    # Base exception for preload_hints errors
    pass


# Specific Exceptions
class ConfigurationError(PreloadHintsError):
    # Raised when the configuration cannot drive a run
    pass


class SiteHostError(ConfigurationError):
    # Raised when neither the board URL nor the request Host header yields a hostname

    def __init__(self, message: str = "Could not detect a valid host using your board URL or request host"):
        super().__init__(f"{message}. Please check configuration.")


class FetchError(PreloadHintsError):
    # Raised when a page cannot be retrieved for processing

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch {url}: {reason}")

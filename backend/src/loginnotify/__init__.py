"""
LoginNotify - Login / OTP Event Relay

Receives login and OTP events as JSON over HTTP and forwards them as
formatted messages to a Telegram chat.
"""

from importlib.metadata import version

__version__ = version("loginnotify")

"""Defines a singleton logger object used by jotform-util.

Every request is logged at DEBUG as `JotForm API <verb> <url>` (the URL
never contains the API key). Error envelopes of non-2xx responses are
logged at ERROR as `JotForm API <status> | <envelope>`.

The logger has no handlers. Until you attach one, errors are printed
to stderr by logging's last resort handler:

    JotformLogger().addHandler(logging.StreamHandler())
"""


import logging


class JotformLogger(logging.Logger):
    """Custom logger. Key=jotform, level=DEBUG"""

    _instance = None
    _init_flag = False

    def __new__(cls, *args, **kwargs):
        """Every JotformSession and JotformClient shares this instance"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if JotformLogger._init_flag:
            return

        super().__init__("jotform", logging.DEBUG)
        JotformLogger._init_flag = True

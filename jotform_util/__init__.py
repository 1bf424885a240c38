"""

## High level interfaces

JotformClient: One method per JotForm API endpoint

SubmissionAnswer: A single answer passed to submission endpoints

ApiResult: Full outcome of a request, returned by JotformClient.execute()

JotformLogger: Custom logger you can connect to your own logging

## Internal interfaces

.session.JotformSession: Request execution and response envelope handling

.flatten: Bracket-notation flattening of request bodies

"""
from .consts import __version__
from .client import JotformClient
from .flatten import SubmissionAnswer
from .result import ApiResult
from .logger import JotformLogger

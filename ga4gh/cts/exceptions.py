"""
Exceptions raised by the compliance suite's client. Transport failures
from requests and malformed response bodies from the protobuf JSON parser
are not wrapped; they reach the test runner as they are.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import json
import sys
import inspect

import google.protobuf.json_format as json_format

import ga4gh.cts.protocol as protocol


def getExceptionClass(name):
    """
    Returns the exception class in this module with the specified name.
    Raises a KeyError if there is no such class.
    """
    classMap = {}
    for className, class_ in inspect.getmembers(sys.modules[__name__]):
        if inspect.isclass(class_) and \
                issubclass(class_, BaseClientException):
            classMap[className] = class_
    return classMap[name]


def _isGAException(body):
    """
    Returns True if the specified response body is a JSON object with
    one of the GAException fields.
    """
    try:
        jsonObject = json.loads(body)
    except ValueError:
        return False
    return isinstance(jsonObject, dict) and (
        "message" in jsonObject or "errorCode" in jsonObject)


class BaseClientException(Exception):
    """
    Superclass of all exceptions raised by the compliance suite.
    """
    message = "Error message not set in exception; this is a bug."

    def getMessage(self):
        """
        Returns the message describing this exception. Subclasses that
        build the message at run time set it on the instance.
        """
        return self.message

    def __str__(self):
        return self.getMessage()


class EmptyResponseException(BaseClientException):
    message = "Empty response from server"


class BadRequestException(BaseClientException):
    """
    The client refused to send a request it can tell is invalid.
    """
    def __init__(self, message="Bad request"):
        super(BadRequestException, self).__init__(message)
        self.message = message


class ConfigurationException(BaseClientException):
    """
    The suite configuration cannot be used.
    """
    def __init__(self, message):
        super(ConfigurationException, self).__init__(message)
        self.message = message


class GAWrapperException(BaseClientException):
    """
    The server answered with a non-success HTTP status. If the body is a
    GAException, its message and error code are kept; otherwise the raw
    body text is.
    """
    def __init__(self, url, httpStatus, body=""):
        super(GAWrapperException, self).__init__(url, httpStatus)
        self.url = url
        self.httpStatus = httpStatus
        self.body = body
        self.gaException = None
        if _isGAException(body):
            try:
                self.gaException = protocol.fromJson(
                    body, protocol.GAException, ignoreUnknownFields=True)
            except json_format.ParseError:
                pass
        self.message = "Url {0} had status_code {1}".format(url, httpStatus)
        if self.gaException is not None:
            self.message += ": {0} (error code {1})".format(
                self.gaException.message, self.gaException.error_code)

    def getServerMessage(self):
        """
        Returns the message reported by the server, or the body text if
        the server did not send a GAException.
        """
        if self.gaException is not None:
            return self.gaException.message
        return self.body

    def getErrorCode(self):
        """
        Returns the server's error code, or None if it did not send one.
        """
        if self.gaException is not None:
            return self.gaException.error_code
        return None

from __future__ import annotations

from enum import IntEnum


class HttpStatus(IntEnum):
    """Assigned HTTP status codes with their reason phrase and description.

    Phrases follow the IANA HTTP Status Code Registry (RFC 9110 wording).
    306 and 418 are listed as "(Unused)" by the registry and keep their
    historical phrases.
    """

    def __new__(cls, value: int, phrase: str = "", description: str = "") -> HttpStatus:
        obj = int.__new__(cls, value)
        obj._value_ = value

        obj.phrase = phrase
        obj.description = description
        return obj

    def __str__(self) -> str:
        return str(self.value)

    # 1xx Informational
    CONTINUE = (
        100,
        "Continue",
        "The server has received the request headers and the client should proceed to send the request body.",
    )
    SWITCHING_PROTOCOLS = (
        101,
        "Switching Protocols",
        "The requester has asked the server to switch protocols and the server has agreed to do so.",
    )
    PROCESSING = (
        102,
        "Processing",
        "The server has received and is processing the request, but no response is available yet.",
    )
    EARLY_HINTS = (
        103,
        "Early Hints",
        "Used to return some response headers before final HTTP message.",
    )

    # 2xx Success
    OK = 200, "OK", "Standard response for successful HTTP requests."
    CREATED = (
        201,
        "Created",
        "The request has been fulfilled, resulting in the creation of a new resource.",
    )
    ACCEPTED = (
        202,
        "Accepted",
        "The request has been accepted for processing, but the processing has not been completed.",
    )
    NON_AUTHORITATIVE_INFORMATION = (
        203,
        "Non-Authoritative Information",
        "The server is a transforming proxy (e.g. a Web accelerator) that received a 200 OK from its origin, "
        "but is returning a modified version of the origin's response.",
    )
    NO_CONTENT = (
        204,
        "No Content",
        "The server successfully processed the request and is not returning any content.",
    )
    RESET_CONTENT = (
        205,
        "Reset Content",
        "The server successfully processed the request, but is not returning any content.",
    )
    PARTIAL_CONTENT = (
        206,
        "Partial Content",
        "The server is delivering only part of the resource (byte serving) due to a range header sent by the client.",
    )
    MULTI_STATUS = (
        207,
        "Multi-Status",
        "The message body that follows is an XML message and can contain a number of separate response codes, "
        "depending on how many sub-requests were made.",
    )
    ALREADY_REPORTED = (
        208,
        "Already Reported",
        "The members of a DAV binding have already been enumerated in a previous reply to this request, "
        "and are not being included again.",
    )
    IM_USED = (
        226,
        "IM Used",
        "The server has fulfilled a request for the resource, and the response is a representation of the result "
        "of one or more instance-manipulations applied to the current instance.",
    )

    # 3xx Redirection
    MULTIPLE_CHOICES = (
        300,
        "Multiple Choices",
        "Indicates multiple options for the resource from which the client may choose.",
    )
    MOVED_PERMANENTLY = (
        301,
        "Moved Permanently",
        "This and all future requests should be directed to the given URI.",
    )
    FOUND = (
        302,
        "Found",
        "This is an example of industry practice contradicting the standard.",
    )
    SEE_OTHER = (
        303,
        "See Other",
        "The response to the request can be found under another URI using a GET method.",
    )
    NOT_MODIFIED = (
        304,
        "Not Modified",
        "Indicates that the resource has not been modified since the version specified by the request headers "
        "If-Modified-Since or If-None-Match.",
    )
    USE_PROXY = (
        305,
        "Use Proxy",
        "The requested resource is available only through a proxy, the address for which is provided in the response.",
    )
    SWITCH_PROXY = 306, "Switch Proxy", "No longer used."
    TEMPORARY_REDIRECT = (
        307,
        "Temporary Redirect",
        "In this case, the request should be repeated with another URI; however, future requests should still use "
        "the original URI.",
    )
    PERMANENT_REDIRECT = (
        308,
        "Permanent Redirect",
        "The request and all future requests should be repeated using another URI.",
    )

    # 4xx Client Error
    BAD_REQUEST = (
        400,
        "Bad Request",
        "The request cannot be fulfilled due to bad syntax.",
    )
    UNAUTHORIZED = (
        401,
        "Unauthorized",
        "Authentication is required and has failed or has not yet been provided.",
    )
    PAYMENT_REQUIRED = 402, "Payment Required", "Reserved for future use."
    FORBIDDEN = (
        403,
        "Forbidden",
        "The request was a valid request, but the server is refusing to respond to it.",
    )
    NOT_FOUND = (
        404,
        "Not Found",
        "The requested resource could not be found but may be available again in the future.",
    )
    METHOD_NOT_ALLOWED = (
        405,
        "Method Not Allowed",
        "A request was made of a resource using a request method not supported by that resource.",
    )
    NOT_ACCEPTABLE = (
        406,
        "Not Acceptable",
        "The requested resource is only capable of generating content not acceptable.",
    )
    PROXY_AUTHENTICATION_REQUIRED = (
        407,
        "Proxy Authentication Required",
        "Proxy authentication is required to access the requested resource.",
    )
    REQUEST_TIMEOUT = (
        408,
        "Request Timeout",
        "The server did not receive a complete request message in time.",
    )
    CONFLICT = (
        409,
        "Conflict",
        "The request could not be processed because of conflict in the request.",
    )
    GONE = (
        410,
        "Gone",
        "The requested resource is no longer available and will not be available again.",
    )
    LENGTH_REQUIRED = (
        411,
        "Length Required",
        "The request did not specify the length of its content, which is required by the resource.",
    )
    PRECONDITION_FAILED = (
        412,
        "Precondition Failed",
        "The server does not meet one of the preconditions that the requester put on the request.",
    )
    CONTENT_TOO_LARGE = (
        413,
        "Content Too Large",
        "The server cannot process the request because the request payload is too large.",
    )
    URI_TOO_LONG = (
        414,
        "URI Too Long",
        "The request-target is longer than the server is willing to interpret.",
    )
    UNSUPPORTED_MEDIA_TYPE = (
        415,
        "Unsupported Media Type",
        "The request entity has a media type which the server or resource does not support.",
    )
    RANGE_NOT_SATISFIABLE = (
        416,
        "Range Not Satisfiable",
        "The client has asked for a portion of the file, but the server cannot supply that portion.",
    )
    EXPECTATION_FAILED = (
        417,
        "Expectation Failed",
        "The expectation given could not be met by at least one of the inbound servers.",
    )
    IM_A_TEAPOT = 418, "I'm a teapot", "I'm a teapot"
    MISDIRECTED_REQUEST = (
        421,
        "Misdirected Request",
        "The request was directed at a server that is not able to produce a response.",
    )
    UNPROCESSABLE_CONTENT = (
        422,
        "Unprocessable Content",
        "The request was well-formed but was unable to be followed due to semantic errors.",
    )
    LOCKED = 423, "Locked", "The resource that is being accessed is locked."
    FAILED_DEPENDENCY = (
        424,
        "Failed Dependency",
        "The request failed due to failure of a previous request.",
    )
    TOO_EARLY = (
        425,
        "Too Early",
        "The server is unwilling to risk processing a request that might be replayed.",
    )
    UPGRADE_REQUIRED = (
        426,
        "Upgrade Required",
        "The server cannot process the request using the current protocol.",
    )
    PRECONDITION_REQUIRED = (
        428,
        "Precondition Required",
        "The origin server requires the request to be conditional.",
    )
    TOO_MANY_REQUESTS = (
        429,
        "Too Many Requests",
        "The user has sent too many requests in a given amount of time.",
    )
    REQUEST_HEADER_FIELDS_TOO_LARGE = (
        431,
        "Request Header Fields Too Large",
        "The server is unwilling to process the request because either an individual header field, "
        "or all the header fields collectively, are too large.",
    )
    UNAVAILABLE_FOR_LEGAL_REASONS = (
        451,
        "Unavailable For Legal Reasons",
        "Resource access is denied for legal reasons.",
    )

    # 5xx Server Error
    INTERNAL_SERVER_ERROR = (
        500,
        "Internal Server Error",
        "An error has occurred and this resource cannot be displayed.",
    )
    NOT_IMPLEMENTED = (
        501,
        "Not Implemented",
        "The server either does not recognize the request method, or it lacks the ability to fulfil the request.",
    )
    BAD_GATEWAY = (
        502,
        "Bad Gateway",
        "The server was acting as a gateway or proxy and received an invalid response from the upstream server.",
    )
    SERVICE_UNAVAILABLE = (
        503,
        "Service Unavailable",
        "The server is currently unavailable. It may be overloaded or down for maintenance.",
    )
    GATEWAY_TIMEOUT = (
        504,
        "Gateway Timeout",
        "The server was acting as a gateway or proxy and did not receive a timely response from the upstream server.",
    )
    HTTP_VERSION_NOT_SUPPORTED = (
        505,
        "HTTP Version Not Supported",
        "The server does not support the HTTP protocol version used in the request.",
    )
    VARIANT_ALSO_NEGOTIATES = (
        506,
        "Variant Also Negotiates",
        "Transparent content negotiation for the request, results in a circular reference.",
    )
    INSUFFICIENT_STORAGE = (
        507,
        "Insufficient Storage",
        "The method could not be performed on the resource because the server is unable to store the representation "
        "needed to successfully complete the request. There is insufficient free space left in your storage allocation.",
    )
    LOOP_DETECTED = (
        508,
        "Loop Detected",
        "The server detected an infinite loop while processing the request.",
    )
    NOT_EXTENDED = (
        510,
        "Not Extended",
        "Further extensions to the request are required for the server to fulfill it."
        "A mandatory extension policy in the request is not accepted by the server for this resource.",
    )
    NETWORK_AUTHENTICATION_REQUIRED = (
        511,
        "Network Authentication Required",
        "The client needs to authenticate to gain network access.",
    )

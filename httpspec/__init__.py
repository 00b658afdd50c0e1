from httpspec.core.structs import HttpMethod, HttpRequest, HttpResponse
from httpspec.core.errors import (
    SpecFailure, StatusMismatch, HeaderMissing,
    DecodeError, MissingContentLength, InvalidContentLength,
)
from httpspec.core.expectation import Expectation
from httpspec.core.spec import Spec
from httpspec.core.params import BuilderParameter, Method, Path, Header, Body, Expect, Combined, Empty
from httpspec.core.builder import SpecBuilder, block, when
from httpspec.core.executor import Executor, Runner
from httpspec.core.client import HttpxExecutor, AsgiRunner
from httpspec.core.codec import encode_body, decode_body
from httpspec.core.settings import settings

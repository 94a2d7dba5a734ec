"""ASGI handler: translates ASGI scope/messages to mockingbird types.

The only component that touches raw ASGI HTTP messages directly. Builds
a typed Request, awaits whatever the dispatcher produces, and sends the
Response back through ASGI send().
"""

import logging

from mockingbird._internal.asgi import Receive, Scope, Send
from mockingbird.http.request import Request
from mockingbird.routing.dispatcher import Dispatcher
from mockingbird.server.sender import send_response

logger = logging.getLogger("mockingbird.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher,
) -> None:
    """Process a single HTTP request.

    Handler failures are logged and re-raised; the ASGI server decides
    whether to answer 500 or drop the connection.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await dispatcher(request)
    except Exception:
        logger.exception("Handler failed for %s %s", request.method, request.path)
        raise

    logger.debug("%d %s %s", response.status, request.method, request.path)
    await send_response(response, send)

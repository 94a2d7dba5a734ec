"""Transport side: ASGI glue, response sending, and the server runner."""

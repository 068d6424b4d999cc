"""ASGI adapter: the boundary between a host server and the dispatcher."""

"""plotworker - stateless chart rendering worker

Turns URL query parameters into a renderable chart document and accepts the
captured image back through a callback endpoint.
"""

__version__ = "1.0.0"

"""Domain service base class."""


class Service:
    """Marker base for rendering services resolved through DI.

    Stateless: a service holds no per-render data, so one instance serves
    every request.
    """

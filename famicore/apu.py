"""Audio processing unit attached to the system bus."""


class APU:
    """The console's audio processing unit."""

    def __init__(self) -> None:
        print("APU initialized")
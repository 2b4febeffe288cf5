from collections.abc import Callable

# Sinks return the number of bytes consumed; anything short of the chunk
# length aborts the transfer.
BodySink = Callable[[bytes], int]
HeaderSink = Callable[[bytes], int]

# Fills the buffer with pending upload bytes and returns how many were copied.
# Returning 0 ends the upload.
ReadSink = Callable[[bytearray], int]

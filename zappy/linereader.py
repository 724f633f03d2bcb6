"""Line-oriented reading on top of a raw ``read(size)`` callable."""

_CHUNK = 1024


class LineReader:
    """Buffers what ``read`` returns and hands it out line by line.

    ``read`` takes a byte count and returns bytes or text; an empty result
    or an OSError marks the stream as broken and sets ``error``.
    """

    def __init__(self, read):
        self._read = read
        self.buffer = ""
        self.error = False

    def _fetch(self):
        try:
            data = self._read(_CHUNK)
        except OSError:
            data = b""
        if not data:
            self.error = True
            return None
        if isinstance(data, bytes):
            data = data.decode(errors="replace")
        return data

    def read_line(self):
        """Return the next line without its newline, or "" once the stream broke.

        At most one read is made per call; when no complete line is available
        afterwards, whatever text is buffered is returned.
        """
        if "\n" not in self.buffer:
            data = self._fetch()
            if data is None:
                return ""
            self.buffer += data
        line, newline, rest = self.buffer.partition("\n")
        self.buffer = rest if newline else ""
        return line

    def read_answer(self):
        """Return the buffered text, reading once if the buffer is empty.

        The buffer is not consumed; "" is returned once the stream broke.
        """
        if self.buffer == "":
            data = self._fetch()
            if data is None:
                return ""
            self.buffer = data
        return self.buffer
"""Line acquisition for the read-execute loop"""

import sys
from typing import Optional, TextIO


class LineReader:
    """
    Reads one command line at a time from a text stream.

    Attributes:
        stream: Source of input lines
        prompt: Written to ``prompt_stream`` before every read ('' for none)
    """

    def __init__(self, stream: Optional[TextIO] = None, prompt: str = "",
                 prompt_stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.prompt = prompt
        self._prompt_stream = prompt_stream

    @property
    def prompt_stream(self) -> TextIO:
        return self._prompt_stream if self._prompt_stream is not None else sys.stdout

    def read_line(self) -> Optional[str]:
        """
        Return the next line without its line ending, or None at end of input.

        A final line with no newline is still returned; the following call
        returns None.
        """
        if self.prompt:
            self.prompt_stream.write(self.prompt)
            self.prompt_stream.flush()

        line = self.stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

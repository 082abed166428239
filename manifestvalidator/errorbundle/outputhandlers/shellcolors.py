import re
import sys


COLORS = {"BLUE": "\033[34m",
          "RED": "\033[31m",
          "GREEN": "\033[32m",
          "YELLOW": "\033[33m",
          "WHITE": "\033[37m",
          "NORMAL": "\033[0m"}

COLOR_TAG = re.compile(r"<<(%s)>>" % "|".join(COLORS))


class OutputHandler(object):
    """A handler that hooks up with the error bundler to colorize the
    output of the application for *nix-based terminals."""

    def __init__(self, buffer=sys.stdout, no_color=False):
        self.pipe = buffer
        self.no_color = no_color

    def colorize_text(self, text):
        """Replaces all the <<COLOR>> tags with terminal escape sequences,
        or strips them out in boring mode."""

        if self.no_color:
            return COLOR_TAG.sub("", text)
        return COLOR_TAG.sub(lambda m: COLORS[m.group(1)], text) + \
            COLORS["NORMAL"]

    def write(self, text):
        "Writes a line of colorized text to the pipe."

        self.pipe.write(self.colorize_text(text))
        self.pipe.write("\n")
        return self

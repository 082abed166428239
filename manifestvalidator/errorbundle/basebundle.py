from io import StringIO

import simplejson as json

from .outputhandlers.shellcolors import OutputHandler


class BaseErrorBundle(object):
    """Keyword Arguments:

    **instant**
        Print each message as soon as it is recorded

    """

    def __init__(self, instant=False, *args, **kwargs):

        self.handler = None

        self.errors = {}
        self.warnings = {}

        self.instant = instant

        super(BaseErrorBundle, self).__init__(*args, **kwargs)

    def _message(type_):
        def wrap(self, err_id, message):
            destination = getattr(self, type_)
            # Keys are derived from the path to the offending value, so two
            # failures of the same kind at the same path share one slot.
            destination[err_id] = message

            # If instant mode is turned on, output the message immediately.
            if self.instant:
                self._print_message(type_, err_id, message)

            return self
        return wrap

    error = _message("errors")
    warning = _message("warnings")

    @property
    def message_count(self):
        return len(self.errors) + len(self.warnings)

    def failed(self, fail_on_warnings=True):
        """Returns a boolean value describing whether the validation
        succeeded or not."""

        return bool(self.errors) or (fail_on_warnings and bool(self.warnings))

    def result(self):
        """The diagnostics as two plain key -> message mappings."""
        return {"errors": dict(self.errors),
                "warnings": dict(self.warnings)}

    def render_json(self):
        "Returns a JSON summary of the validation operation."

        output = {"success": not self.failed(fail_on_warnings=False),
                  "errors": dict(self.errors),
                  "warnings": dict(self.warnings),
                  "error_count": len(self.errors),
                  "warning_count": len(self.warnings)}

        output.update(self._extend_json() or {})

        # Output the JSON.
        return json.dumps(output, ensure_ascii=True)

    def _extend_json(self):
        """Override this method to extend the JSON produced by the bundle."""
        pass

    def print_summary(self, verbose=False, no_color=False):
        "Prints a summary of the validation process so far."

        buffer = StringIO()
        self.handler = OutputHandler(buffer, no_color)

        # Make a neat little printout.
        self.handler.write("\n<<GREEN>>Summary:").write("-" * 30)
        self.handler.write("%s Errors, %s Warnings" %
                           (len(self.errors), len(self.warnings)))

        if self.failed(fail_on_warnings=False):
            self.handler.write("<<BLUE>>Test failed! Errors:")
            for err_id, message in sorted(self.errors.items()):
                self._print_message("<<RED>>Error:<<NORMAL>>\t", err_id,
                                    message, verbose)
        else:
            self.handler.write("<<GREEN>>All tests succeeded!")

        for err_id, message in sorted(self.warnings.items()):
            self._print_message("<<YELLOW>>Warning:<<NORMAL>> ", err_id,
                                message, verbose)

        self.handler.write("\n")
        return buffer.getvalue()

    def _print_message(self, prefix, err_id, message, verbose=True):
        "Prints a message and takes care of all sorts of nasty code"

        if self.handler is None:
            return

        output = ["\n", prefix, message]
        if verbose:
            output.append("\n\tKey:\t%s" % err_id)

        self.handler.write("".join(output))

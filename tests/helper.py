import sys

from manifestvalidator.errorbundle import ErrorBundle
from manifestvalidator.errorbundle.outputhandlers.shellcolors import OutputHandler


class TestCase(object):
    def setup_method(self, method=None):
        self.err = None
        self.listed = False
        self.packaged = False

    def reset(self):
        """
        Reset the test case so that it can be run a second time (ideally with
        different parameters).
        """
        self.err = None

    def setup_err(self):
        """
        Instantiate the error bundle object. Use the `instant` parameter to
        have it output errors as they're generated.

        An existing error bundle will be overwritten with a fresh one that has
        the state that the test case was setup with.
        """
        self.err = ErrorBundle(instant=True,
                               listed=getattr(self, "listed", False),
                               packaged=getattr(self, "packaged", False))
        self.err.handler = OutputHandler(sys.stdout, True)

    def assert_failed(self, with_errors=False, with_warnings=None):
        """
        First, asserts that the error bundle registers a failure (recognizing
        whether warnings are acknowledged). Second, if with_errors is True,
        the presence of errors is asserted. If it is not true (default), it
        is tested that errors are not present. If with_warnings is not None,
        the presence of warnings is tested just like with_errors)
        """
        assert self.err.failed(fail_on_warnings=with_warnings or
                                                with_warnings is None), \
                "Test did not fail; failure was expected."

        if with_errors:
            assert self.err.errors, "Errors were expected."
        elif self.err.errors:
            raise AssertionError("Tests found unexpected errors: %s" %
                                 self.err.print_summary(verbose=True))

        if with_warnings is not None:
            if with_warnings:
                assert self.err.warnings, "Warnings were expected."
            elif self.err.warnings:
                raise AssertionError("Tests found unexpected warnings: %s" %
                                     self.err.print_summary())

    def assert_passes(self, warnings_pass=False):
        """
        Assert that no errors have been raised. Warnings count as a failure
        unless warnings_pass is True.
        """
        assert not self.err.failed(fail_on_warnings=not warnings_pass), \
                ("Test was intended to pass%s, but it did not: %s" %
                     (" with warnings" if warnings_pass else "",
                      self.err.result()))

    def assert_silent(self):
        """
        Assert that no messages (errors or warnings) have been raised.
        """
        assert not self.err.errors, 'Got these: %s' % self.err.errors
        assert not self.err.warnings, 'Got these: %s' % self.err.warnings

    def assert_got_errid(self, errid):
        """
        Assert that a message with the given key has been generated during
        the validation process.
        """
        assert errid in self.err.errors or errid in self.err.warnings, \
                "%s was expected, but it was not found in %s." % (
                    errid, self.err.result())

    def assert_no_errid(self, errid):
        assert errid not in self.err.errors, \
                "%s was not expected: %s" % (errid, self.err.errors[errid])

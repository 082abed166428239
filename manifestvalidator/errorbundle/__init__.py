from .basebundle import BaseErrorBundle
from .manifestmixin import ManifestMixin
from .metadatamixin import MetadataMixin


class ErrorBundle(MetadataMixin, ManifestMixin, BaseErrorBundle):
    """Collects the errors and warnings of a single validation run.

    A fresh bundle is created for every manifest that gets validated, so
    nothing leaks from one run into the next.

    Keyword Arguments:

    **listed**
        True if the app is destined for the Marketplace, false if not
    **packaged**
        True if the app is shipped as a package rather than hosted

    """

    def __init__(self, listed=False, packaged=False, *args, **kwargs):
        super(ErrorBundle, self).__init__(*args, **kwargs)

        self.save_resource("listed", bool(listed))
        self.save_resource("packaged", bool(packaged))

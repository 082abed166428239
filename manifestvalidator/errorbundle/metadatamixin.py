class MetadataMixin(object):
    """
    This mixin adds a resource store to the standard error bundle. The
    validation options and the parsed manifest are kept here so that every
    rule can reach them through the bundle it is handed.
    """

    def __init__(self, *args, **kwargs):

        self.resources = {}

        super(MetadataMixin, self).__init__(*args, **kwargs)

    def get_resource(self, name):
        """Retrieve an object that has been stored by another test."""

        return self.resources.get(name, False)

    def save_resource(self, name, resource):
        """Save an object such that it can be used by other tests."""

        self.resources[name] = resource
        return resource

import logging


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the length of the string contained in the field named 'data'
    strictly connected to the field named 'length': unpacking reads the
    length from the sibling, setting a new value writes the length back.

    The expression is a dotted path: a leading '.' indicates we refer to a
    field at the same level, i.e. starting from the father.
    '''
    logger = logging.getLogger(__name__)

    def __init__(self, expression):
        self.expression = expression

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve_field(self, instance):
        fields_path = self.expression.split('.')
        # '.length'.split(".") -> ['', 'length']
        if fields_path[0] != '':
            raise ValueError(f"only relative dependencies are supported, not '{self.expression}'")

        if instance.father is None:
            raise AttributeError(f"cannot resolve '{self.expression}' for a field without father")

        field = instance.father

        for component_name in fields_path[1:]:
            field = getattr(field, component_name)
            self.logger.debug(' resolved sub-component "%s" from "%s"' % (
                field.__class__.__name__, component_name))

        return field

    def resolve(self, instance):
        '''With this method we resolve the attribute with respect to the instance
        passed as argument.'''
        value = self.resolve_field(instance).value

        self.logger.debug(' resolved with value %s' % value)

        return value

    def resolve_and_set(self, instance, value):
        """Write back the value into the field we depend on"""
        self.resolve_field(instance).value = value

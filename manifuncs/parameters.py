class NotExitingDefault:
    def __str__(self):
        return '(no default)'


class Parameter(object):
    type = 'base_parameter'


    def __init__(self, name, default=NotExitingDefault(), error=''):
        self.name = name
        self.default = default
        # Message used when a given value is not valid for this parameter
        self.error = error or 'Requires %s to be of a %s type' % (name, self.type)


    def have_default(self):
        return not isinstance(self.default, NotExitingDefault)


    # An optional parameter that was given its own default value is considered as not given
    def is_given(self, v):
        return not (self.have_default() and v is self.default)


    def is_valid(self, v):
        raise NotImplementedError()


    def __str__(self):
        return '[PARAMETER:: name=%s type=%s default=%s]' % (self.name, self.type, self.default)


    def as_json(self):
        r = {'name': self.name, 'type': self.type}
        if self.have_default():
            r['default'] = self.default
        return r


class StringParameter(Parameter):
    type = 'string'


    def is_valid(self, v):
        return isinstance(v, str)


# Manifests only know about arrays, but in python both lists and tuples are ordered arrays
class ArrayParameter(Parameter):
    type = 'array'


    def is_valid(self, v):
        return isinstance(v, (list, tuple))


class OneOfParameter(Parameter):
    def __init__(self, name, choices, default=NotExitingDefault(), error=''):
        self.choices = choices
        self.type = '|'.join([c.type for c in choices])
        super(OneOfParameter, self).__init__(name, default=default, error=error)


    def is_valid(self, v):
        return self.get_matching_choice(v) is not None


    # Give the first choice that accept this value, so callers can dispatch on it
    def get_matching_choice(self, v):
        for choice in self.choices:
            if choice.is_valid(v):
                return choice
        return None

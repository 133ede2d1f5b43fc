import codecs
import traceback

import jinja2

from .log import LoggerFactory
from .evaluater import evaluater, FunctionError
# Be sure the core functions are exported before any template is rendered
from . import functions

# Global logger for this part
logger = LoggerFactory.create_logger('generator')

GENERATOR_STATES = ['COMPLIANT', 'ERROR', 'UNKNOWN']


class Generator(object):
    def __init__(self, name, template, variables=None):
        self.name = name
        self.buf = template
        self.variables = variables or {}

        self.template = None
        self.output = None

        self.log = ''
        self.__state = 'UNKNOWN'


    @classmethod
    def from_file(cls, name, path, variables=None):
        try:
            with codecs.open(path, 'r', 'utf8') as f:
                buf = f.read()
        except IOError as exp:
            g = cls(name, None, variables=variables)
            g.set_error('Cannot open template file %s : %s' % (path, exp))
            return g
        return cls(name, buf, variables=variables)


    def __set_state(self, state):
        if state not in GENERATOR_STATES:
            raise ValueError('Unknown generator state %s' % state)
        self.__state = state


    def get_state(self):
        return self.__state


    def set_error(self, log):
        self.__set_state('ERROR')
        self.log = log
        logger.error('Generator %s: %s' % (self.name, log))


    def set_compliant(self, log):
        self.__set_state('COMPLIANT')
        self.log = log
        logger.debug('Generator %s: %s' % (self.name, log))


    def get_json_dump(self):
        return {'name': self.name, 'state': self.__state, 'log': self.log, 'output': self.output}


    def __reset(self):
        self.output = None
        self.template = None


    def _get_environment(self):
        env = jinja2.Environment(trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
        # Functions are usable both as calls: prefix(hosts, 'web-') and as filters: hosts | prefix('web-')
        all_functions = evaluater.get_all_functions()
        env.globals.update(all_functions)
        env.filters.update(all_functions)
        return env


    def generate(self):
        # Maybe the template file was not readable
        if self.buf is None:
            self.__reset()
            return

        env = self._get_environment()

        # Now try to make it a jinja template object
        try:
            self.template = env.from_string(self.buf)
        except jinja2.TemplateSyntaxError as exp:
            self.__reset()
            self.set_error('Template %s did raise an error with jinja2 : %s' % (self.name, exp))
            return

        # Now try to render all of this with real objects
        try:
            self.output = self.template.render(**self.variables)
        except FunctionError as exp:
            self.__reset()
            self.set_error('Template rendering %s did fail on a function call : %s' % (self.name, exp))
            return
        except Exception:
            self.__reset()
            self.set_error('Template rendering %s did raise an error with jinja2 : %s' % (self.name, traceback.format_exc()))
            return

        self.set_compliant('Template %s is rendered' % self.name)
        logger.debug('Generator %s did generate output:\n%s' % (self.name, self.output))

import functools

from .log import LoggerFactory

# Global logger for this part
logger = LoggerFactory.create_logger('evaluater')

functions = {
}

functions_to_groups = {
}

functions_to_parameters = {
}


class FunctionError(Exception):
    pass


class ArityError(FunctionError):
    pass


class ArgumentTypeError(FunctionError, TypeError):
    pass


class UnknownFunctionError(FunctionError, KeyError):
    # KeyError would display the repr of the message
    def __str__(self):
        return str(self.args[0])


# This allow to have parameter for export_evaluater_function
def parametrized(dec):
    def layer(*args, **kwargs):
        def repl(f):
            return dec(f, *args, **kwargs)


        return repl


    return layer


# Look at the given arguments (positional ones, then the ones given by name) against the
# function declared parameters, and give back the exact list of arguments the function will be called with
def check_arguments(fname, parameters, arguments, keywords=None):
    keywords = keywords or {}
    names = [p.name for p in parameters]
    for name in keywords:
        if name not in names:
            raise ArgumentTypeError('%s(): Unknown argument %s' % (fname, name))
        if names.index(name) < len(arguments):
            raise ArgumentTypeError('%s(): Got multiple values for argument %s' % (fname, name))

    nb_given = len(arguments) + len(keywords)
    nb_mandatory = len([p for p in parameters if not p.have_default()])
    if nb_given < nb_mandatory:
        raise ArityError('%s(): Wrong number of arguments given (%d for %d)' % (fname, nb_given, nb_mandatory))
    # Enough arguments, but maybe an optional one was given by name instead of a mandatory one
    for (idx, parameter) in enumerate(parameters):
        if idx >= len(arguments) and parameter.name not in keywords and not parameter.have_default():
            raise ArityError('%s(): Missing argument %s' % (fname, parameter.name))

    if len(arguments) > len(parameters):
        logger.debug('%s(): ignoring %d extra arguments' % (fname, len(arguments) - len(parameters)))

    call_arguments = []
    for (idx, parameter) in enumerate(parameters):
        if idx < len(arguments):
            value = arguments[idx]
        elif parameter.name in keywords:
            value = keywords[parameter.name]
        else:
            call_arguments.append(parameter.default)
            continue
        if parameter.is_given(value) and not parameter.is_valid(value):
            raise ArgumentTypeError('%s(): %s' % (fname, parameter.error))
        call_arguments.append(value)
    return call_arguments


def _export_evaluater_function(f, function_group, parameters):
    fname = f.__name__


    # Arguments are checked once here, so the function body only get valid values
    @functools.wraps(f)
    def exported(*arguments, **keywords):
        return f(*check_arguments(fname, parameters, arguments, keywords))


    # Export the function to the allowed functions
    functions[fname] = exported
    functions_to_groups[fname] = function_group
    functions_to_parameters[fname] = parameters
    logger.debug('Evaluater: exporting function %s' % fname)
    return exported


@parametrized
def export_evaluater_function(f, function_group, parameters):
    return _export_evaluater_function(f, function_group, parameters)


class Evaluater(object):
    def get_all_functions(self):
        return functions.copy()


    def get_function_group(self, fname):
        return functions_to_groups[fname]


    # The host give us all the call arguments wrapped into one container, so we
    # unwrap this level here and the functions only see plain positional arguments
    def call_function(self, fname, arguments):
        f = functions.get(fname, None)
        if f is None:
            logger.error('Eval unknown function %s' % fname)
            raise UnknownFunctionError('Unknown function %s' % fname)

        if not isinstance(arguments, (list, tuple)):
            arguments = [arguments]
        logger.debug('CALL: %s%s' % (fname, tuple(arguments)))
        r = f(*arguments)
        logger.debug('CALL: %s result: %s' % (fname, r))
        return r


    def list_functions(self):
        res = []
        for fname in sorted(functions):
            f = functions[fname]
            _doc = getattr(f, '__doc__', None)
            prototype = []
            for p in functions_to_parameters[fname]:
                default = str(p.default) if p.have_default() else '__NO_DEFAULT__'
                prototype.append([p.name, default, p.type])
            res.append({'name': fname, 'doc': _doc, 'prototype': prototype, 'group': functions_to_groups[fname]})
        return res


evaluater = Evaluater()

#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import sys
import datetime
import logging
import codecs
from threading import Lock as ThreadLock

from colorama import init as init_colorama
from termcolor import cprint as _termcolor_cprint

# level name -> (display color, is kept in the last errors stack)
LEVELS = {
    'DEBUG'  : ('magenta', False),
    'INFO'   : ('blue', False),
    'WARNING': ('yellow', True),
    'ERROR'  : ('red', True),
}

LAST_ERRORS_STACK_SIZE = 20


def is_tty():
    # The classic windows CMD is too limited for colors
    if os.name == 'nt' and os.environ.get('ANSICON', '') == '':
        return False
    if hasattr(sys.stdout, 'isatty'):
        return sys.stdout.isatty()
    return False


if is_tty():
    # will do nothing for other than windows
    init_colorama()


    def cprint(s, color=None, on_color=None, end='\n'):
        _termcolor_cprint(str(s), color=color or None, on_color=on_color or None, end=end)

# tests, pipes: no colors
else:
    def cprint(s, color=None, on_color=None, end='\n'):
        print(str(s), end=end)


loggers = {}


class Logger(object):
    def __init__(self):
        self.name = 'manifuncs'
        self.level = logging.INFO
        self.is_force_level = False  # a forced level (by the host for example) cannot be changed by a not forced one

        # Files are only written when a data_dir is loaded
        self.data_dir = ''
        self.log_files = {}

        self.last_errors_stack = dict([(level_name, []) for (level_name, (_, stacked)) in LEVELS.items() if stacked])

        # Functions can be called from several threads, so writes are protected.
        # The lock is recreated if we are now in a sub process
        self.log_lock = None
        self.current_lock_pid = None


    def _get_lock(self):
        cur_pid = os.getpid()
        if self.log_lock is None or self.current_lock_pid != cur_pid:
            self.log_lock = ThreadLock()
            self.current_lock_pid = cur_pid
        return self.log_lock


    def load(self, data_dir, name):
        self.name = name
        self.data_dir = data_dir
        if not os.path.exists(self.data_dir):
            os.mkdir(self.data_dir)


    # Close all opened log files and go back to the stdout only mode
    def unload(self):
        with self._get_lock():
            for f in self.log_files.values():
                f.close()
            self.log_files.clear()
            self.data_dir = ''


    def setLevel(self, s, force=False):
        if not force and self.is_force_level:
            return
        level = logging.getLevelName(s.upper())
        if s.upper() not in LEVELS or not isinstance(level, int):
            self.error('Invalid logging level configuration %s' % s)
            return
        if force:
            self.is_force_level = True
        self.level = level


    def is_enabled(self, level_name):
        return logging.getLevelName(level_name) >= self.level


    def get_errors(self):
        return self.last_errors_stack


    # part '' is the core one, written in daemon.log
    def _get_log_file(self, part):
        fname = '%s.log' % part if part else 'daemon.log'
        f = self.log_files.get(fname, None)
        if f is None:
            f = codecs.open(os.path.join(self.data_dir, fname), 'ab', encoding='utf-8')
            self.log_files[fname] = f
        return f


    def format_line(self, level_name, part, args):
        now = datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        s_part = '[%s]' % part if part else ''
        return '%s %-7s %s%s: %s' % (now, level_name, self.name, s_part, ' '.join([str(a) for a in args]))


    def log(self, level_name, *args, **kwargs):
        if not self.is_enabled(level_name):
            return
        color, stacked = LEVELS[level_name]
        part = kwargs.get('part', '')
        with self._get_lock():
            s = self.format_line(level_name, part, args)
            if kwargs.get('do_print', True):
                cprint(s, color=color)

            if stacked:
                stack = self.last_errors_stack[level_name]
                stack.append(s)
                del stack[:-LAST_ERRORS_STACK_SIZE]

            if self.data_dir == '':
                return
            f = self._get_log_file(part)
            f.write(s + '\n')
            f.flush()


    def debug(self, *args, **kwargs):
        self.log('DEBUG', *args, **kwargs)


    def info(self, *args, **kwargs):
        self.log('INFO', *args, **kwargs)


    def warning(self, *args, **kwargs):
        self.log('WARNING', *args, **kwargs)


    def error(self, *args, **kwargs):
        self.log('ERROR', *args, **kwargs)


core_logger = Logger()


class PartLogger(object):
    def __init__(self, part):
        self.part = part


    def log(self, level_name, *args, **kwargs):
        kwargs['part'] = kwargs.get('part', self.part)
        core_logger.log(level_name, *args, **kwargs)


    def debug(self, *args, **kwargs):
        self.log('DEBUG', *args, **kwargs)


    def info(self, *args, **kwargs):
        self.log('INFO', *args, **kwargs)


    def warning(self, *args, **kwargs):
        self.log('WARNING', *args, **kwargs)


    def error(self, *args, **kwargs):
        self.log('ERROR', *args, **kwargs)


# Create logger for a specific part if not already exists
class LoggerFactory(object):
    @classmethod
    def create_logger(cls, part):
        if part in loggers:
            return loggers[part]
        loggers[part] = PartLogger(part)
        return loggers[part]

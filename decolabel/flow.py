#
# DecoLabel - dive stop schedule validation library.
#
# Copyright (C) 2026 by DecoLabel Team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
Engine mods pipeline.

Engine steps are generated by engine calculation and sent to engine mods.
The mods are coroutines created for every calculation when the first step
is generated. When the calculation finishes, the mods are closed, so they
can report their findings gathered from all the steps.
"""

from functools import wraps


def coroutine(func):
    """
    Decorator for a coroutine function.

    The coroutine is advanced to its first ``yield`` expression, so it is
    ready to receive engine steps.
    """
    @wraps(func)
    def start(*args, **kwargs):
        cr = func(*args, **kwargs)
        next(cr)
        return cr
    return start


@coroutine
def broadcast(*mods):
    """
    Send every received engine step to all engine mods.

    The engine mods are closed when the coroutine is closed.

    :param mods: Engine mod coroutines.
    """
    try:
        while True:
            step = yield
            for m in mods:
                m.send(step)
    finally:
        for m in mods:
            m.close()


def sender(calculate, *factories):
    """
    Decorate engine calculation generator function, so every engine step
    is sent to engine mods.

    The mods are created with `factories` functions when the first step is
    generated. They are closed when the calculation is exhausted or
    closed.

    :param calculate: Engine calculation generator function.
    :param factories: Functions creating engine mod coroutines.
    """
    @wraps(calculate)
    def pipeline(*args, **kw):
        mods = None
        try:
            for step in calculate(*args, **kw):
                if mods is None:
                    mods = broadcast(*(f() for f in factories))
                mods.send(step)
                yield step
        finally:
            if mods is not None:
                mods.close()
    return pipeline


# vim: sw=4:et:ai

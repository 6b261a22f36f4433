# Reticulum License
#
# Copyright (c) 2016-2025 Mark Qvist
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# - The Software shall not be used in any kind of system which includes amongst
#   its functions the ability to purposefully do harm to human beings.
#
# - The Software shall not be used, directly or indirectly, in the creation of
#   an artificial intelligence, machine learning or language model training
#   dataset, including but not limited to any use that contributes to the
#   training or development of such a model or algorithm.
#
# - The above copyright notice and this permission notice shall be included in
#   all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import enum

class DigestErrorType(enum.IntEnum):
    """
    DigestException type codes
    """
    DE_BACKEND_INIT      = 0
    DE_ALREADY_FINALIZED = 1


class DigestException(Exception):
    """
    An exception raised by a digest session, with a type code.
    """
    def __init__(self, de_type: DigestErrorType, *args):
        super().__init__(*args)
        self.type = de_type


class BackendInitFailure(DigestException):
    """
    The native backend could not allocate or initialise its context.
    The session that raised it is not usable.
    """
    def __init__(self, *args):
        super().__init__(DigestErrorType.DE_BACKEND_INIT, *args)


class AlreadyFinalized(DigestException):
    """
    Data was fed to a session after its digest was finalized, or the
    session was released before it was finalized.
    """
    def __init__(self, *args):
        super().__init__(DigestErrorType.DE_ALREADY_FINALIZED, *args)

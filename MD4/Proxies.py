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

from Cryptodome.Hash import MD4 as pycryptodome_md4

import MD4
from MD4.Session import SessionStatus, check_input
from MD4.Exceptions import AlreadyFinalized, BackendInitFailure

# This proxy class exists to give the pycryptodomex MD4
# implementation the same session API as the internal one.

class MD4SessionProxy:
    name        = "md4"
    digest_size = 16
    block_size  = 64

    def __init__(self, data=None):
        self.real    = None
        self._digest = None
        self.status  = SessionStatus.ACTIVE

        try:
            real = pycryptodome_md4.new()
        except Exception as e:
            MD4.log("Could not initialise pycryptodomex MD4 context: "+str(e), MD4.LOG_ERROR)
            raise BackendInitFailure("Could not initialise pycryptodomex MD4 context: "+str(e)) from e

        self.real = real

        if data is not None:
            try:
                self.update(data)
            except Exception:
                self.release()
                raise

    @classmethod
    def _from_real(cls, real):
        proxy = cls.__new__(cls)
        proxy.real    = real
        proxy._digest = None
        proxy.status  = SessionStatus.ACTIVE
        return proxy

    def update(self, data):
        data = check_input(data, "update")

        if self.status == SessionStatus.FINALIZED:
            if len(data) == 0:
                return
            MD4.log("Rejected "+str(len(data))+" bytes fed to finalized "+str(self), MD4.LOG_DEBUG)
            raise AlreadyFinalized("Cannot update an MD4 session after it has been finalized")

        if len(data) == 0:
            return

        self.real.update(data)

    def final(self):
        if self.status == SessionStatus.FINALIZED:
            if self._digest == None:
                raise AlreadyFinalized("Cannot finalize an MD4 session that was released")
            return self._digest

        self._digest = self.real.digest()
        self.status  = SessionStatus.FINALIZED
        self._release_real()
        MD4.log("Finalized "+str(self)+", digest is "+MD4.prettyhexrep(self._digest), MD4.LOG_EXTREME)

        return self._digest

    def digest(self):
        if self.status == SessionStatus.FINALIZED:
            return self.final()
        else:
            return self.real.digest()

    def hexdigest(self):
        return self.digest().hex()

    def copy(self):
        if self.status == SessionStatus.FINALIZED:
            clone = MD4SessionProxy._from_real(None)
            clone._digest = self._digest
            clone.status  = SessionStatus.FINALIZED
            return clone
        else:
            return MD4SessionProxy._from_real(self.real.copy())

    def release(self):
        if self.status == SessionStatus.ACTIVE:
            self.status = SessionStatus.FINALIZED
        self._release_real()

    def _release_real(self):
        self.real = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()

    def __str__(self):
        return "<pycryptodomex MD4 session "+hex(id(self))+">"

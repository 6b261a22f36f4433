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

import importlib.util

PROVIDER_NONE          = 0x00
PROVIDER_INTERNAL      = 0x01
PROVIDER_PYCRYPTODOMEX = 0x02

FORCE_INTERNAL = False
PROVIDER = PROVIDER_NONE

pycryptodomex_v = None
use_pycryptodomex = False

try:
    if not FORCE_INTERNAL and importlib.util.find_spec("Cryptodome") != None:
        import Cryptodome
        pycryptodomex_v = Cryptodome.__version__
        v = pycryptodomex_v.split(".")

        version_ok = False
        if int(v[0]) == 3:
            if int(v[1]) >= 9:
                version_ok = True
        elif int(v[0]) > 3:
            version_ok = True

        if version_ok:
            # Make sure the native context can actually be created
            from Cryptodome.Hash import MD4 as probe
            probe_context = probe.new()
            del probe_context
            use_pycryptodomex = True

except Exception as e:
    use_pycryptodomex = False

if use_pycryptodomex:
    PROVIDER = PROVIDER_PYCRYPTODOMEX
else:
    PROVIDER = PROVIDER_INTERNAL

def backend():
    if PROVIDER == PROVIDER_NONE:
        return "none"
    elif PROVIDER == PROVIDER_INTERNAL:
        return "internal"
    elif PROVIDER == PROVIDER_PYCRYPTODOMEX:
        return "pycryptodomex "+str(pycryptodomex_v)

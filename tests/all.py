import unittest

from .test_primitives import TestCompressor
from .test_primitives import TestBitCounter
from .test_primitives import TestPadding
from .test_hashes import TestMD4
from .test_session import TestSession
from .test_session import TestLogging
from .test_backends import TestProvider
from .test_backends import TestProviderSelection
from .test_backends import TestNativeBackend

if __name__ == '__main__':
    unittest.main(verbosity=2)

import doctest
import os
import unittest

import roaster
from roaster._lib import (classify, coder, jscoder, options,
                          properties, renderers, structures)

class TestDoctest(unittest.TestCase):
    def test_lib_doctests(self):
        for mod in (roaster, classify, coder, jscoder, options,
                    properties, renderers, structures):
            failed, _ = doctest.testmod(mod, optionflags=doctest.ELLIPSIS|doctest.IGNORE_EXCEPTION_DETAIL)
            self.assertEqual(failed, 0, mod.__name__)

    def test_readme(self):
        failed, _ = doctest.testfile(os.path.join("..", "README.md"))
        self.assertEqual(failed, 0)

import sys
import os.path

import decolabel

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.todo', 'sphinx.ext.viewcode',
]
project = 'decolabel'
source_suffix = '.rst'
master_doc = 'index'

version = release = decolabel.__version__
copyright = 'DecoLabel Team'

epub_basename = 'decolabel - {}'.format(version)
epub_author = 'DecoLabel Team'

todo_include_todos = True

html_theme = 'sphinx_rtd_theme'


# vim: sw=4:et:ai

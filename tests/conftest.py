"""Shared test fixtures."""

import pytest

SAMPLE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<keywords>
  <keyword name="strlen" type="function" returnType="size_t" definedIn="string.h">
    <params>
      <param type="const char *" name="cs"/>
    </params>
    <desc>Returns the length of cs.</desc>
  </keyword>
  <keyword name="EOF" type="constant" returnType="int" definedIn="stdio.h">
    <desc>End of file marker. See <a href="getc">getc</a>.</desc>
  </keyword>
  <keyword name="getc" type="function" returnType="int" definedIn="stdio.h">
    <params>
      <param type="FILE *" name="stream"/>
    </params>
    <desc><![CDATA[Reads a character. Returns <a href="EOF">EOF</a> at end.]]></desc>
  </keyword>
  <keyword name="abs" type="function" returnType="int">
    <params>
      <param type="int"/>
    </params>
  </keyword>
</keywords>
"""


@pytest.fixture
def write_xml(tmp_path):
    """Return a helper that writes XML text to a file and returns its path."""

    def _write(content, filename="keywords.xml"):
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_xml(write_xml):
    return write_xml(SAMPLE_XML)

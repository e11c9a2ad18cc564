from pathlib import Path

import pytest


GUIDE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE tv SYSTEM "xmltv.dtd">
<tv generator-info-name="test">
  <channel id="bbc1.uk">
    <display-name lang="en">BBC One</display-name>
    <display-name>5-1</display-name>
    <url>http://bbc.co.uk/one</url>
    <icon src="http://img/bbc1.png" width="64" height="64"/>
  </channel>
  <channel id="nameless.uk">
    <display-name>   </display-name>
    <url>http://example.com</url>
  </channel>
  <channel id="multi.es">
    <display-name lang="es">Uno</display-name>
    <display-name lang="en">One</display-name>
    <display-name>abc</display-name>
  </channel>
  <channel>
    <display-name>No id</display-name>
  </channel>
  <!-- comment between records -->
  <programme start="20200101100000 +0000" stop="20200101110000 +0000" channel="bbc1.uk">
    <title lang="es">A</title>
    <title lang="en">B</title>
    <sub-title lang="en">The Pilot</sub-title>
    <desc lang="en">Something happens.</desc>
    <credits>
      <director>Jane Director</director>
      <actor role="Lead">John Actor</actor>
      <stunt-double>Nobody</stunt-double>
      <guest>Guest Star</guest>
    </credits>
    <date>2019</date>
    <category lang="en">X</category>
    <category lang="en">Y</category>
    <category lang="es">Z</category>
    <country>UK</country>
    <icon src="http://img/poster.png" width="100" height="200"/>
    <icon src="http://img/banner.png" width="300" height="100"/>
    <icon src="http://img/narrow.png" width="50" height="100"/>
    <episode-num system="xmltv_ns">1/6.2.0</episode-num>
    <episode-num system="dd_progid">EP00003026.0666</episode-num>
    <episode-num system="imdb.com">series/tt1837576</episode-num>
    <episode-num system="imdb.com">episode/tt3288596</episode-num>
    <episode-num system="thetvdb.com">series/248841</episode-num>
    <video><quality>HDTV</quality></video>
    <quality>HDTV</quality>
    <previously-shown start="20190101000000"/>
    <premiere>First showing</premiere>
    <new/>
    <rating system="MPAA">
      <value>TV-G</value>
    </rating>
    <star-rating>
      <value>3/5</value>
    </star-rating>
  </programme>
  <programme start="20200101110000 +0000" stop="20200101120000 +0000" channel="BBC1.UK">
    <title>Second</title>
    <live/>
    <previously-shown/>
  </programme>
  <programme start="20200101120000 +0000" stop="20200101130000 +0000" channel="itv.uk">
    <title>Other channel</title>
  </programme>
  <programme start="20200102100000 +0000" stop="20200102110000 +0000" channel="bbc1.uk">
    <title>Tomorrow</title>
  </programme>
  <programme channel="bbc1.uk">
    <title>No times</title>
  </programme>
</tv>
"""


@pytest.fixture
def write_xml(tmp_path: Path):
    """Write an XMLTV document to a temporary file and return its path"""
    def _write(content: str, name: str = "guide.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def guide_path(write_xml) -> Path:
    return write_xml(GUIDE_XML)


@pytest.fixture
def write_programme(write_xml):
    """Write a one-programme document (channel 'test.channel', 2020-01-01 10:00-11:00 UTC)"""
    def _write(body: str, start: str = "20200101100000", stop: str = "20200101110000") -> Path:
        return write_xml(
            '<?xml version="1.0" encoding="UTF-8"?>\n<tv>\n'
            f'<programme start="{start}" stop="{stop}" channel="test.channel">{body}</programme>\n'
            '</tv>\n'
        )
    return _write

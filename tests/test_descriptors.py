"""Tests for the config.xml and network security config writers."""

import xml.etree.ElementTree as ET

from arise_setup.assets import PLACEHOLDERS
from arise_setup.descriptors import (
    APP_ID,
    build_network_security_config,
    write_config_xml,
    write_network_security_config,
)
from arise_setup.project import ProjectContext
from arise_setup.results import StepStatus

WIDGETS_NS = "{http://www.w3.org/ns/widgets}"


def test_network_security_config_is_valid_xml() -> None:
    """Test the descriptor parses and trusts both local hosts."""
    root = ET.fromstring(build_network_security_config().encode("utf-8"))

    assert root.tag == "network-security-config"
    assert root.find("base-config").get("cleartextTrafficPermitted") == "true"
    sources = [c.get("src") for c in root.iter("certificates")]
    assert sources == ["system", "user"]
    domains = [d.text for d in root.find("domain-config").iter("domain")]
    assert domains == ["127.0.0.1", "localhost"]


def test_write_network_security_config_creates_dirs(ctx: ProjectContext) -> None:
    """Test res/xml/ is created when missing."""
    assert not (ctx.root / "res").exists()

    result = write_network_security_config(ctx)

    assert result.status is StepStatus.OK
    assert ctx.network_security_xml.read_text(encoding="utf-8") == (
        build_network_security_config()
    )


def test_write_network_security_config_overwrites(ctx: ProjectContext) -> None:
    """Test existing content is discarded and reruns are byte-identical."""
    ctx.network_security_xml.parent.mkdir(parents=True)
    ctx.network_security_xml.write_text("<custom/>")

    write_network_security_config(ctx)
    first = ctx.network_security_xml.read_bytes()
    write_network_security_config(ctx)

    assert b"<custom/>" not in first
    assert ctx.network_security_xml.read_bytes() == first


def test_config_xml_content(ctx: ProjectContext) -> None:
    """Test the manifest parses and carries the fixed settings."""
    write_config_xml(ctx)

    root = ET.parse(ctx.config_xml).getroot()
    assert root.tag == f"{WIDGETS_NS}widget"
    assert root.get("id") == APP_ID
    assert root.find(f"{WIDGETS_NS}content").get("src") == "launcher.html"

    navigation = [e.get("href") for e in root.iter(f"{WIDGETS_NS}allow-navigation")]
    assert "http://localhost:*" in navigation
    assert "http://127.0.0.1:*" in navigation

    platform = root.find(f"{WIDGETS_NS}platform")
    assert platform.get("name") == "android"
    edit = platform.find(f"{WIDGETS_NS}edit-config")
    assert edit.get("mode") == "merge"
    assert edit.get("target") == "/manifest/application"
    resource = platform.find(f"{WIDGETS_NS}resource-file")
    assert resource.get("src") == "res/xml/network_security_config.xml"


def test_config_xml_discards_customization(ctx: ProjectContext) -> None:
    """Test an edited config.xml is replaced wholesale on every run."""
    ctx.config_xml.write_text('<widget id="com.user.custom"><name>Mine</name></widget>')

    result = write_config_xml(ctx)
    first = ctx.config_xml.read_bytes()
    write_config_xml(ctx)

    assert "replaced any existing one" in result.message
    assert b"com.user.custom" not in first
    assert ctx.config_xml.read_bytes() == first


def test_config_xml_references_seeded_assets(ctx: ProjectContext) -> None:
    """Test every resources/ path in config.xml is one the seeder writes."""
    write_config_xml(ctx)
    text = ctx.config_xml.read_text(encoding="utf-8")

    referenced = {part.split('"')[0] for part in text.split('"resources/')[1:]}
    assert referenced
    assert referenced <= set(PLACEHOLDERS)

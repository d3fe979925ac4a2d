"""XML descriptors that the setup owns outright and regenerates every run.

Neither file is merged with what is on disk. In particular config.xml is
replaced wholesale, so hand edits to it are lost on the next run, while
www/index.html only ever receives a merge-on-absence injection.
"""

from arise_setup.files import write_text
from arise_setup.project import ProjectContext
from arise_setup.results import StepResult

LOCAL_HOSTS: tuple[str, ...] = ("127.0.0.1", "localhost")

APP_ID = "com.arise.vr"
APP_VERSION = "1.0.0"
ANDROID_MANIFEST = "app/src/main/AndroidManifest.xml"


def build_network_security_config(hosts: tuple[str, ...] = LOCAL_HOSTS) -> str:
    """Android network security config allowing cleartext to the local hosts."""
    domains = "".join(
        f'    <domain includeSubdomains="true">{host}</domain>\n' for host in hosts
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<network-security-config>\n"
        '  <base-config cleartextTrafficPermitted="true">\n'
        "    <trust-anchors>\n"
        '      <certificates src="system" />\n'
        '      <certificates src="user" />\n'
        "    </trust-anchors>\n"
        "  </base-config>\n"
        '  <domain-config cleartextTrafficPermitted="true">\n'
        f"{domains}"
        "  </domain-config>\n"
        "</network-security-config>\n"
    )


CONFIG_XML = f"""<?xml version='1.0' encoding='utf-8'?>
<widget id="{APP_ID}" version="{APP_VERSION}" xmlns="http://www.w3.org/ns/widgets" xmlns:cdv="http://cordova.apache.org/ns/1.0">
    <name>APPLICATION NAME</name>
    <description>AR/VR tour app</description>
    <author email="dev@cordova.apache.org" href="https://cordova.apache.org">Apache Cordova Team</author>
    <content src="launcher.html" />
    <allow-navigation href="*" />
    <allow-navigation href="http://localhost:*" />
    <allow-navigation href="http://127.0.0.1:*" />
    <access origin="*" />
    <allow-intent href="http://*/*" />
    <allow-intent href="https://*/*" />
    <preference name="Orientation" value="landscape" />
    <preference name="Fullscreen" value="true" />
    <preference name="AndroidInsecureFileModeEnabled" value="true" />
    <preference name="AllowInlineMediaPlayback" value="true" />
    <preference name="DisallowOverscroll" value="true" />
    <platform name="android">
        <edit-config file="{ANDROID_MANIFEST}" mode="merge" target="/manifest/application">
            <application android:networkSecurityConfig="@xml/network_security_config" android:usesCleartextTraffic="true" xmlns:android="http://schemas.android.com/apk/res/android" />
        </edit-config>
        <resource-file src="res/xml/network_security_config.xml" target="app/src/main/res/xml/network_security_config.xml" />
        <icon background="resources/android/icon-background.png" foreground="resources/android/icon-foreground.png" />
        <icon src="resources/icon.png" />
        <preference name="AndroidWindowSplashScreenBackground" value="#000000" />
        <preference name="AndroidWindowSplashScreenAnimatedIcon" value="resources/android/splash-icon.png" />
        <preference name="SplashMaintainAspectRatio" value="true" />
        <preference name="ShowSplashScreen" value="true" />
        <preference name="AutoHideSplashScreen" value="false" />
        <preference name="FadeSplashScreenDuration" value="0" />
    </platform>
</widget>
"""


def write_network_security_config(ctx: ProjectContext) -> StepResult:
    """Write res/xml/network_security_config.xml, replacing any existing file."""
    write_text(ctx.network_security_xml, build_network_security_config())
    return StepResult.ok(f"Created/updated {ctx.relative(ctx.network_security_xml)}")


def write_config_xml(ctx: ProjectContext) -> StepResult:
    """Write the full config.xml, discarding any existing one."""
    write_text(ctx.config_xml, CONFIG_XML)
    return StepResult.ok(
        f"Wrote full {ctx.relative(ctx.config_xml)} (replaced any existing one)"
    )

"Constants that will be used across files."

DEFAULT_WEBAPP_MRKT_URLS = ("https://marketplace.firefox.com",
                            "https://marketplace.allizom.org",
                            "https://marketplace-dev.allizom.org")

BANNED_ORIGINS = (
    "gaiamobile.org",
    "mozilla.com",
    "mozilla.org",
)

# This magic number brought to you by @cvan (see bug 770755)
# Updated 11/21/12: Bumped to 12 because Gaia is different.
MAX_IDEAL_NAME_LENGTH = 12

DEFAULT_APP_TYPE = "web"
PRIVILEGED_TYPES = ("certified", "privileged")

ORIENTATIONS = ("portrait", "landscape", "portrait-secondary",
                "landscape-secondary", "portrait-primary",
                "landscape-primary")

PERMISSIONS = {
    'web': frozenset([
        'alarms', 'audio-capture', 'audio-channel-content',
        'audio-channel-normal', 'desktop-notification', 'fmradio',
        'geolocation', 'push', 'storage', 'video-capture'
    ]),
    'privileged': frozenset([
        'audio-channel-alarm', 'audio-channel-notification', 'browser',
        'camera', 'contacts', 'device-storage:pictures',
        'device-storage:videos', 'device-storage:music',
        'device-storage:sdcard', 'feature-detection', 'input', 'mobileid',
        'mobilenetwork', 'moz-attention', 'moz-audio-channel-ringer',
        'moz-audio-channel-telephony', 'moz-firefox-accounts',
        'speaker-control', 'systemXHR', 'tcp-socket'
    ]),
    'certified': frozenset([
        'attention', 'audio-channel-publicnotification',
        'audio-channel-ringer', 'audio-channel-telephony',
        'background-sensors', 'backgroundservice', 'bluetooth',
        'cellbroadcast', 'downloads', 'deprecated-hwvideo',
        'device-storage:apps', 'device-storage:crashes', 'embed-apps',
        'firefox-accounts', 'idle', 'input-manage', 'networkstats-manage',
        'nfc', 'nfc-manager', 'open-remote-window', 'permissions',
        'phonenumberservice', 'power', 'resourcestats-manage', 'settings',
        'sms', 'telephony', 'time', 'voicemail', 'webapps-manage',
        'wifi-manage', 'wappush'
    ]),
}

_FULL_PERMISSIONS = ("readonly", "readwrite", "readcreate", "createonly")

PERMISSIONS_ACCESS = {
    "contacts": _FULL_PERMISSIONS,
    "device-storage:apps": _FULL_PERMISSIONS,
    "device-storage:music": _FULL_PERMISSIONS,
    "device-storage:pictures": _FULL_PERMISSIONS,
    "device-storage:sdcard": _FULL_PERMISSIONS,
    "device-storage:videos": _FULL_PERMISSIONS,
    "settings": ("readonly", "readwrite"),
}

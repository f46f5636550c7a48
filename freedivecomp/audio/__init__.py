"""Audio package.

Import ``cues`` or ``tones`` directly; ``tones`` pulls in numpy and is
only loaded when sound is enabled.
"""

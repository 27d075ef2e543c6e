"""Pytest configuration and shared fixtures."""
import sys
import os
import pytest

# Add src and the repo root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from emoji_data.schema import AnnotationRecord


# ============================================================================
# Common test fixtures
# ============================================================================

@pytest.fixture
def sample_emoji_test():
    """Excerpt of emoji-test.txt with two groups and mixed qualifications."""
    return """# emoji-test.txt
# Date: 2023-02-01
# Version: 15.1

# group: Smileys & Emotion

# subgroup: face-smiling
1F600                                                  ; fully-qualified     # 😀 E1.0 grinning face
1F603                                                  ; fully-qualified     # 😃 E0.6 grinning face with big eyes
1F636 200D 1F32B FE0F                                  ; fully-qualified     # 😶‍🌫️ E13.1 face in clouds
1F636 200D 1F32B                                       ; minimally-qualified # 😶‍🌫 E13.1 face in clouds

# group: People & Body

# subgroup: hand-fingers-open
1F44B                                                  ; fully-qualified     # 👋 E0.6 waving hand
1F44B 1F3FB                                            ; fully-qualified     # 👋🏻 E1.0 waving hand: light skin tone
1F590                                                  ; unqualified         # 🖐 E0.7 hand with fingers splayed

# Smileys & Emotion subtotal:		3
#EOF
"""


@pytest.fixture
def sample_annotations():
    """Glyph-keyed annotation table."""
    return {
        '😀': AnnotationRecord(
            default=['face', 'grin', 'grinning face'],
            spoken_form=['grinning face'],
        ),
        '😶‍🌫️': AnnotationRecord(
            default=['absentminded', 'face in clouds', 'face in the fog', 'head in clouds'],
            spoken_form=['face in clouds'],
        ),
    }


@pytest.fixture
def sample_annotations_document():
    """CLDR annotations.json document."""
    return {
        'annotations': {
            'identity': {'language': 'en'},
            'annotations': {
                '😀': {
                    'default': ['face', 'grin', 'grinning face'],
                    'tts': ['grinning face'],
                },
                '👋': {
                    'default': ['hand', 'wave', 'waving'],
                    'tts': ['waving hand'],
                },
            },
        },
    }

"""Tests for catalog assembly from emoji-test.txt."""
import json
import pytest

from emoji_data.catalog import (
    LineScanner,
    NoGroup,
    InGroup,
    assemble_emoji,
    parse_emojis,
    catalog_to_dict,
    dump_catalog,
)
from emoji_data.schema import AnnotationRecord, EmojiRecord
from emoji_data.transforms.tokenizer import tokenize_line

GRINNING_LINE = '1F600                                                  ; fully-qualified     # 😀 E1.0 grinning face'


class TestParseEmojis:
    """Tests for the catalog entry point."""

    def test_skips_comments(self):
        emojis = parse_emojis("# This is a comment\n# another", {})

        assert emojis == {}

    def test_single_emoji(self):
        emojis = parse_emojis(f"# group: group1\n{GRINNING_LINE}", {})

        assert emojis == {
            'group1': [EmojiRecord(codepoints='1F600', character='😀', name='grinning face', annotations=[])]
        }

    def test_name_from_spoken_form(self):
        annotations = {'😀': AnnotationRecord(default=[], spoken_form=['grinning'])}

        emojis = parse_emojis(f"# group: group1\n{GRINNING_LINE}", annotations)

        assert emojis['group1'][0].name == 'grinning'

    def test_first_spoken_form_wins(self):
        annotations = {'😀': AnnotationRecord(
            default=['one'],
            spoken_form=['grinning face', 'not a name to be used', 'another name not to be used'],
        )}

        emojis = parse_emojis(f"# group: group1\n{GRINNING_LINE}", annotations)

        assert emojis['group1'][0].name == 'grinning face'

    def test_sets_codepoints(self):
        emojis = parse_emojis(""" # group: group1
1F62E 200D 1F4A8                                       ; fully-qualified     # 😮‍💨 E13.1 face exhaling
""", {})

        assert emojis['group1'][0].codepoints == '1F62E 200D 1F4A8'

    def test_sets_character(self):
        emojis = parse_emojis(""" # group: group1
1F62E 200D 1F4A8                                       ; fully-qualified     # 😮‍💨 E13.1 face exhaling
1F44B 1F3FB                                            ; fully-qualified     # 👋🏻 E1.0 waving hand: light skin tone
""", {})

        assert emojis['group1'][0].character == '😮‍💨'
        assert emojis['group1'][1].character == '👋🏻'
        assert emojis['group1'][1].name == 'waving hand: light skin tone'

    def test_selects_fully_qualified(self):
        emojis = parse_emojis(""" # group: group1
1F636 200D 1F32B FE0F                                  ; fully-qualified     # 😶‍🌫️ E13.1 face in clouds
1F636 200D 1F32B                                       ; minimally-qualified # 😶‍🌫 E13.1 face in clouds
2620                                                   ; unqualified         # ☠ E1.0 skull and crossbones
""", {})

        assert len(emojis['group1']) == 1
        assert emojis['group1'][0].codepoints == '1F636 200D 1F32B FE0F'

    def test_groups_emojis(self, sample_emoji_test):
        emojis = parse_emojis(sample_emoji_test, {})

        assert list(emojis) == ['Smileys & Emotion', 'People & Body']
        assert [e.name for e in emojis['Smileys & Emotion']] == [
            'grinning face', 'grinning face with big eyes', 'face in clouds',
        ]
        assert [e.codepoints for e in emojis['People & Body']] == ['1F44B', '1F44B 1F3FB']

    def test_sets_annotations(self, sample_emoji_test, sample_annotations):
        emojis = parse_emojis(sample_emoji_test, sample_annotations)
        smileys = emojis['Smileys & Emotion']

        assert smileys[0].annotations == ['face', 'grin', 'grinning face']
        assert smileys[1].annotations == []
        assert smileys[2].annotations == ['absentminded', 'face in clouds', 'face in the fog', 'head in clouds']

    def test_without_annotation_table(self, sample_emoji_test):
        emojis = parse_emojis(sample_emoji_test)

        assert emojis['People & Body'][0].name == 'waving hand'

    def test_repeated_group_header_appends(self):
        """A header seen again reuses the existing group."""
        emojis = parse_emojis("""# group: A
1F600 ; fully-qualified # 😀 E1.0 grinning face
# group: B
1F44B ; fully-qualified # 👋 E0.6 waving hand
# group: A
1F603 ; fully-qualified # 😃 E0.6 grinning face with big eyes
""")

        assert list(emojis) == ['A', 'B']
        assert [e.character for e in emojis['A']] == ['😀', '😃']

    def test_empty_group_kept(self):
        emojis = parse_emojis("# group: Component\n# subgroup: skin-tone\n")

        assert emojis == {'Component': []}

    def test_data_before_group_dropped(self):
        emojis = parse_emojis(f"{GRINNING_LINE}\n# group: group1\n")

        assert emojis == {'group1': []}

    def test_truncated_lines_skipped(self):
        emojis = parse_emojis("""# group: group1
1F600 ; fully-qualified
; fully-qualified # 😀 E1.0 grinning face
1F600
1F603 ; fully-qualified # 😃 E0.6 grinning face with big eyes
""")

        assert [e.codepoints for e in emojis['group1']] == ['1F603']

    def test_crlf_input(self):
        emojis = parse_emojis(f"# group: group1\r\n{GRINNING_LINE}\r\n")

        assert emojis['group1'][0].name == 'grinning face'

    def test_idempotent(self, sample_emoji_test, sample_annotations):
        first = parse_emojis(sample_emoji_test, sample_annotations)
        second = parse_emojis(sample_emoji_test, sample_annotations)

        assert first == second
        assert first is not second


class TestAssembleEmoji:
    """Tests for single-line assembly."""

    @pytest.mark.parametrize('qualification', ['minimally-qualified', 'unqualified', 'component'])
    def test_drops_other_qualifications(self, qualification):
        fields = tokenize_line(f'1F600 ; {qualification} # 😀 E1.0 grinning face')

        assert assemble_emoji(fields, {}) is None

    def test_builds_record(self, sample_annotations):
        emoji = assemble_emoji(tokenize_line(GRINNING_LINE), sample_annotations)

        assert emoji == EmojiRecord(
            codepoints='1F600',
            character='😀',
            name='grinning face',
            annotations=['face', 'grin', 'grinning face'],
        )


class TestLineScanner:
    """Tests for scanner state transitions."""

    def test_initial_state(self):
        scanner = LineScanner()

        assert scanner.state == NoGroup()
        assert scanner.catalog == {}

    def test_header_moves_to_group(self):
        scanner = LineScanner()
        scanner.feed('# group: Flags')

        assert scanner.state == InGroup('Flags')
        assert scanner.catalog == {'Flags': []}

    def test_comment_and_blank_keep_state(self):
        scanner = LineScanner()
        scanner.feed('# group: Flags')
        scanner.feed('# subgroup: flag')
        scanner.feed('')

        assert scanner.state == InGroup('Flags')

    def test_counts_skipped_lines(self):
        scanner = LineScanner()
        scanner.feed(GRINNING_LINE)
        scanner.feed('# group: group1')
        scanner.feed('2620 ; unqualified # ☠ E1.0 skull and crossbones')
        scanner.feed(GRINNING_LINE)

        assert scanner.skipped == 2
        assert len(scanner.catalog['group1']) == 1


class TestSerialization:
    """Tests for JSON output."""

    def test_catalog_to_dict(self, sample_emoji_test, sample_annotations):
        data = catalog_to_dict(parse_emojis(sample_emoji_test, sample_annotations))

        assert data['Smileys & Emotion'][0] == {
            'codepoints': '1F600',
            'character': '😀',
            'name': 'grinning face',
            'annotations': ['face', 'grin', 'grinning face'],
        }

    def test_dump_leaves_glyphs_unescaped(self, sample_emoji_test):
        text = dump_catalog(parse_emojis(sample_emoji_test))

        assert '😀' in text
        assert '\\u' not in text
        assert 'Smileys & Emotion' in text
        assert json.loads(text)['People & Body'][1]['codepoints'] == '1F44B 1F3FB'

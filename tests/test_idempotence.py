from hypothesis import given, settings, strategies as st

import fix_images
import remove_arcade_iframes
import replace_embeds
import replace_hints
from docs_files import html_escape_attr

TRANSFORMS = [
    replace_embeds.process_content,
    remove_arcade_iframes.process_content,
    replace_hints.process_content,
    fix_images.process_content,
]

SAMPLE_DOC = """\
# Setup

{% hint style="info" %}
Read this first.
{% endhint %}

{% embed url="https://www.youtube.com/watch?v=1&t=2" %}
Walkthrough
{% endembed %}

{% embed url="https://x.com/single" %}

<iframe src="https://app.arcade.software/share/abc" width="100%"></iframe>

<figure><img src=".gitbook/assets/a.png" alt="Screen"><figcaption><p>Settings &amp; more</p></figcaption></figure>

<img src="b.png" alt='B' alt="C">
"""

alt_text = st.text(alphabet='abcXYZ &"<>', min_size=1).filter(lambda s: s.strip() == s and s)


def test_sample_doc_is_stable_after_one_pass():
    for transform in TRANSFORMS:
        once = transform(SAMPLE_DOC)
        assert once.changed
        twice = transform(once.text)
        assert not twice.changed
        assert twice.text == once.text


@given(alt_text)
@settings(max_examples=80, deadline=None)
def test_img_alt_is_escaped_exactly_once(alt):
    tag = f'<img src="a.png" alt="{html_escape_attr(alt)}" />'
    result = fix_images.process_content(tag)
    assert not result.changed
    assert result.text == tag


@given(alt_text)
@settings(max_examples=80, deadline=None)
def test_embed_url_is_escaped_exactly_once(url):
    result = replace_embeds.process_content("{% embed url='" + url + "' %}")
    assert f'src="{html_escape_attr(url)}"' in result.text
    assert not replace_embeds.process_content(result.text).changed

import pytest

SAMPLE_LOG = """\
# Proof log 2026-02-27

### 2026-02-27 09:00-10:30 JST
- どこで: my-app
- 誰が: CC: 42件
- 何を: 5ファイル変更 (+1000/-20)
- いつ: 2026-02-27 09:00-10:30 JST（90分）

### 2026-02-27 11:00-11:30 JST
- どこで: tools
- 何を: 1ファイル変更 (+10/-0)
- いつ: 2026-02-27 11:00-11:30 JST（30分）

### 2026-02-27 13:00-13:30 JST
- どこで: my-app
- 何を: 2ファイル変更 (+234/-1)
- いつ: 2026-02-27 13:00-13:30 JST（30分）

### 2026-02-27 15:00-15:05 JST
- いつ: 2026-02-27 15:00-15:05 JST（5分）
"""


@pytest.fixture
def sample_log() -> str:
    return SAMPLE_LOG

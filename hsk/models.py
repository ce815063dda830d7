from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class VocabularyEntry:
    """One HSK word as served by the read endpoint."""
    id: int
    character: str
    pinyin: str
    word_class: str
    translation: str

    @classmethod
    def from_dict(cls, data: dict) -> "VocabularyEntry":
        """Build an entry from a JSON object or a database row."""
        return cls(
            id=int(data["id"]),
            character=data["character"],
            pinyin=data["pinyin"],
            # word_class is nullable in hsk1_vocabulary
            word_class=data.get("word_class") or "",
            translation=data["translation"],
        )

    def to_dict(self) -> dict:
        return asdict(self)

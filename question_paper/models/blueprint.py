# question_paper/models/blueprint.py
"""Paper blueprint models"""
from typing import Dict, Any, List, Optional
from question_paper.errors import InvalidBlueprint
from question_paper.models.quota import QuotaRequest
from question_paper.utils import normalize_marks


class SectionPart:
    """A fixed number of questions of one marks value inside a section"""

    def __init__(self, label: str, marks, count: int, title: str):
        self.label = label
        self.marks = marks
        self.count = count
        self.title = title

    @property
    def target_marks(self):
        return self.marks * self.count

    def to_request(self) -> QuotaRequest:
        """Convert to the quota request the allocator consumes"""
        return QuotaRequest(self.marks, self.count, self.label)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'label': self.label,
            'marks': self.marks,
            'count': self.count,
            'title': self.title,
        }

    def __repr__(self) -> str:
        return f"SectionPart({self.label}, {self.count} x {self.marks})"


class Section:
    """A named section of the paper made of one or more parts"""

    def __init__(self, name: str, title: str, parts: List[SectionPart]):
        self.name = name
        self.title = title
        self.parts = parts

    @property
    def is_single_part(self) -> bool:
        return len(self.parts) == 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Section':
        """Parse a section, deriving part labels and titles when absent"""
        if not isinstance(data, dict):
            raise InvalidBlueprint(f"Section must be an object, got {data!r}")
        name = data.get('name')
        if not name:
            raise InvalidBlueprint(f"Section is missing a name: {data!r}")
        raw_parts = data.get('parts')
        if not raw_parts or not isinstance(raw_parts, list):
            raise InvalidBlueprint(f"Section {name} needs a non-empty list of parts")

        parts = []
        for index, raw in enumerate(raw_parts, start=1):
            if not isinstance(raw, dict):
                raise InvalidBlueprint(
                    f"Section {name} part {index} must be an object, got {raw!r}"
                )
            if 'marks' not in raw or 'count' not in raw:
                raise InvalidBlueprint(
                    f"Section {name} part {index} needs both 'marks' and 'count'"
                )
            try:
                marks = normalize_marks(raw['marks'])
            except (TypeError, ValueError) as e:
                raise InvalidBlueprint(
                    f"Section {name} part {index} has invalid marks {raw['marks']!r}"
                ) from e
            if marks is None:
                raise InvalidBlueprint(f"Section {name} part {index} has no marks value")

            if len(raw_parts) == 1:
                default_label = f"section{name}"
            else:
                default_label = f"section{name}_part{index}"

            parts.append(SectionPart(
                label=raw.get('label', default_label),
                marks=marks,
                count=raw['count'],
                title=raw.get('title', f"Part {index} ({marks} marks each)"),
            ))

        return cls(name, data.get('title', f"Section {name}"), parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'title': self.title,
            'parts': [p.to_dict() for p in self.parts],
        }

    def __repr__(self) -> str:
        return f"Section({self.name}, {len(self.parts)} parts)"


class Blueprint:
    """Ordered list of sections describing the paper to assemble"""

    def __init__(self, sections: List[Section], note: Optional[str] = None):
        self.sections = sections
        self.note = note

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Blueprint':
        if not isinstance(data, dict):
            raise InvalidBlueprint(f"Blueprint must be an object, got {type(data).__name__}")
        raw_sections = data.get('sections')
        if not raw_sections or not isinstance(raw_sections, list):
            raise InvalidBlueprint("Blueprint needs a non-empty list of sections")

        sections = [Section.from_dict(s) for s in raw_sections]

        names = [s.name for s in sections]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise InvalidBlueprint(f"Duplicate section names: {', '.join(duplicates)}")

        return cls(sections, note=data.get('note'))

    @property
    def parts(self) -> List[SectionPart]:
        return [part for section in self.sections for part in section.parts]

    @property
    def target_marks(self):
        """Marks the paper is worth when every quota is met"""
        return sum(p.target_marks for p in self.parts)

    def to_plan(self) -> List[QuotaRequest]:
        """One quota request per part, in section order"""
        return [part.to_request() for part in self.parts]

    def to_dict(self) -> Dict[str, Any]:
        data = {'sections': [s.to_dict() for s in self.sections]}
        if self.note is not None:
            data['note'] = self.note
        return data

    def __repr__(self) -> str:
        return f"Blueprint({[s.name for s in self.sections]})"

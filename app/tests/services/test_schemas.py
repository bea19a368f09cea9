from app.domain.user.schemas import CamelModel
from typing import Optional
import warnings

def test_camel_model_aliases_without_deprecation_warning():
    with warnings.catch_warnings():
        warnings.simplefilter('error')

        class Report(CamelModel):
            image_url: Optional[str] = None
            created_by_id: int

    report = Report.model_validate({'imageUrl': 'https://example.com/a.jpg', 'created_by_id': 3})

    assert report.model_dump(by_alias=True) == {'imageUrl': 'https://example.com/a.jpg', 'createdById': 3}

from archview.domain.shared.model.value import RecordModel, Text


class Subject(RecordModel):
    """A controlled-vocabulary term referenced by accessions."""

    uri: Text = ""
    title: Text = ""
    jsonmodel_type: Text = "subject"
    source: Text = ""

from pydantic import BaseModel, ConfigDict, StrictStr


class VerifyIn(BaseModel):
    content: StrictStr
    source: StrictStr = ""


class SiftAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    stop: StrictStr
    investigate_source: StrictStr
    find_coverage: StrictStr
    trace_claims: StrictStr


class VerificationReport(BaseModel):
    # extra keys the model adds (e.g. a confidence score) are passed through
    model_config = ConfigDict(extra="allow")

    sift_analysis: SiftAnalysis
    credibility_rating: StrictStr   # see CREDIBILITY_RATINGS in prompt.py
    final_advice: StrictStr
    learning_tips: StrictStr
    content: StrictStr = ""
    source: StrictStr = ""

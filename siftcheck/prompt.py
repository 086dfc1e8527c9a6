# siftcheck/prompt.py
from typing import Dict, List

CREDIBILITY_RATINGS = (
    "Highly Credible",
    "Generally Credible",
    "Needs Caution",
    "Potentially Misleading",
    "Suspected Fake",
    "Confirmed Fake",
    "Unable to Determine",
)

SIFT_PROMPT = """You are a professional fake news verification expert. Please analyze the following information using the SIFT four-step verification method:

Information: "{content}"
Source: "{source}"

Please respond in English with the following structure, providing detailed analysis for each step:

1. [Stop Analysis] Explain why we need to stop and carefully verify this information, pointing out suspicious elements.
2. [Source Investigation] Analyze the credibility of this information source, including publisher background, history, etc.
3. [Coverage Search] Suggest how to find relevant reports from other reliable media, indicate if there is multi-source verification.
4. [Claim Tracing] Analyze how to track original statements and evidence, check if information has been distorted.
5. [Credibility Rating] Provide final credibility rating ({ratings})
6. [Final Advice] Provide clear handling recommendations.
7. [Learning Points] Summarize verification techniques learned from this case.

Please respond in JSON format with the following fields:
- sift_analysis: {{stop, investigate_source, find_coverage, trace_claims}}
- credibility_rating: string
- final_advice: string
- learning_tips: string"""


def build_prompt(content: str, source: str) -> str:
    """Content and source go in verbatim; an empty source is shown as 'Not provided'."""
    return SIFT_PROMPT.format(
        content=content,
        source=source or "Not provided",
        ratings="/".join(CREDIBILITY_RATINGS),
    )


def build_messages(content: str, source: str) -> List[Dict[str, str]]:
    return [{"role": "user", "content": build_prompt(content, source)}]

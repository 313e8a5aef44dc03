SCORING_BANDS = (
    (90, 100, "Exceptional match, all key requirements met"),
    (75, 89, "Strong match, most requirements met with minor gaps"),
    (60, 74, "Moderate match, some key requirements missing"),
    (40, 59, "Weak match, significant gaps in experience/skills"),
    (0, 39, "Poor match, fundamental requirements not met"),
)

RESPONSE_SCHEMA = """{
  "score": number (0-100 integer, overall match percentage),
  "summary": string (exactly 2 sentences describing the candidate's fit),
  "missing_keywords": string[] (array of important skills/keywords from the JD that are missing),
  "formatting_issues": string[] (array of specific formatting problems found),
  "strengths": string[] (array of what the candidate does well),
  "recommendations": string[] (array of actionable improvements to increase match score)
}"""


def build_scoring_guidelines() -> str:
    return "\n".join(f"- {low}-{high}: {label}" for low, high, label in SCORING_BANDS)


def build_analysis_prompt(job_description: str, resume_text: str) -> str:
    system = (
        "You are an expert ATS (Applicant Tracking System) and hiring manager with 15 years of experience.\n"
        "Your task is to evaluate the resume against the job description and provide actionable feedback."
    )
    return (
        f"{system}\n\n"
        "JOB DESCRIPTION (between the <job_description> tags):\n"
        f"<job_description>\n{job_description}\n</job_description>\n\n"
        "RESUME TEXT (between the <resume> tags):\n"
        f"<resume>\n{resume_text}\n</resume>\n\n"
        "Analyze the resume and return a valid JSON object with the following structure:\n"
        f"{RESPONSE_SCHEMA}\n\n"
        "Scoring guidelines:\n"
        f"{build_scoring_guidelines()}\n\n"
        "Be thorough but fair in your assessment. "
        "Focus on actionable feedback that helps the candidate improve."
    )

"""LLM chain for the strategic profile analysis.

Reads the resume text plus the freelancer's Upwork and LinkedIn URLs and
produces the ProfileAnalysis every later stage builds on.
"""

from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient, PromptSpec
from crafter.core.logging import get_logger
from crafter.core.schemas_profile import ProfileAnalysis, UserProfile

logger = get_logger(__name__)

STAGE = "profile_analysis"

# Resumes past this length are truncated before prompting
MAX_RESUME_CHARS = 20000

OUTPUT_SCHEMA = """{
  "archetype": "string - short professional title/archetype (e.g. 'Senior Full Stack Engineer')",
  "proficiency": integer between 0 and 100 - overall technical proficiency based on experience,
  "skills": ["4-8 core technical skills extracted from the resume"],
  "projects": [{"name": "project name from resume", "type": "Enterprise | SaaS | Startup | ..."}],
  "gapTitle": "string - compelling title for the main strategic gap",
  "gapDescription": "string - 1-2 sentences on a high-value positioning gap",
  "suggestedPivot": "string - specific actionable repositioning suggestion",
  "missingSkillCluster": "string - label of the skill category",
  "missingSkill": "string - in-demand skill to add given their background",
  "missingSkillDesc": "string - why this skill is valuable (1 sentence)",
  "clientGapType": "string - label for the client type category",
  "clientGap": "string - client vertical/industry to target",
  "clientGapDesc": "string - why their background fits this client type (1 sentence)",
  "recommendedKeywords": ["5-7 high-value keywords to add to the Upwork profile"],
  "signatureMechanism": "string or null - a named method they are known for, if evident"
}"""

SYSTEM_PROMPT = f"""You are an expert Upwork freelancer consultant. You analyze professional profile data and provide strategic positioning insights.

RULES:
1. Be specific and actionable, not generic
2. Base every insight on actual resume content
3. Focus on high-value market positioning
4. Recommend keywords that command premium rates
5. Identify genuine blindspots, not flattery

CARDINALITY:
- "skills" has between 4 and 8 entries
- "recommendedKeywords" has between 5 and 7 entries
- "proficiency" is an integer from 0 to 100

Output valid JSON matching this schema:
{OUTPUT_SCHEMA}
"""


def build_profile_prompt(profile: UserProfile) -> PromptSpec:
    """
    Build the profile analysis prompt.

    Args:
        profile: Uploaded profile with extracted resume text

    Returns:
        PromptSpec for the profile_analysis stage
    """
    resume_text = profile.resume_text[:MAX_RESUME_CHARS]

    user_prompt = f"""Analyze the following professional profile data and provide strategic insights.

RESUME CONTENT:
{resume_text}

UPWORK PROFILE: {profile.upwork_url}
LINKEDIN PROFILE: {profile.linkedin_url}

Return the analysis as JSON."""

    return PromptSpec(
        stage=STAGE,
        system_prompt=SYSTEM_PROMPT,
        user_prompt=user_prompt,
        output_schema=OUTPUT_SCHEMA,
    )


def analyze_profile(profile: UserProfile, client: GenerationClient) -> ProfileAnalysis:
    """
    Run the profile analysis stage.

    Raises:
        ServiceError: LLM unreachable or unauthorized
        FormatError: Output invalid after one retry
    """
    settings = get_settings()
    spec = build_profile_prompt(profile)

    logger.info(
        f"Analyzing profile {profile.id}",
        extra={"session_id": profile.id, "resume_chars": len(profile.resume_text)},
    )

    return client.generate(spec, ProfileAnalysis, temperature=settings.PROFILE_TEMPERATURE)

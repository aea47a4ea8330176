"""
LLM prompts for verdict generation and trending topic suggestions.
Centralized prompt definitions used by the verdict and topic services.
"""

# ============================================================================
# VERDICT GENERATION PROMPTS
# ============================================================================

VERDICT_RESPONSE_FORMAT = """Format the response as a JSON object with the following structure:
{{
  "verdict": "TRUE|FALSE|PARTIALLY_TRUE|CONTEXT_NOT_CLEAR",
  "explanation": "detailed explanation...",
  "sources": [
    {{"index": 1, "name": "Source Name", "url": "https://source.url"}}
  ],
  "confidence": 0.XX
}}"""

VERDICT_WITH_EVIDENCE_PROMPT = """Act as a fact-checking expert. Analyze this statement and determine if it's \
TRUE, FALSE, PARTIALLY_TRUE, or CONTEXT_NOT_CLEAR.

Statement: "{statement}"

EVIDENCE GATHERED FROM THE WEB:
{evidence_block}

INSTRUCTIONS:
1. Base your verdict ONLY on the evidence above.
2. Cite evidence in the explanation with bracket markers like [1] that match the evidence numbers.
3. List every cited evidence item in "sources", keeping its evidence number as "index".
4. Use CONTEXT_NOT_CLEAR when the evidence is insufficient or ambiguous.
5. Give a confidence between 0.0 and 1.0.

{response_format}"""

VERDICT_GENERAL_KNOWLEDGE_PROMPT = """Act as a fact-checking expert. Analyze this statement and determine if it's \
TRUE, FALSE, PARTIALLY_TRUE, or CONTEXT_NOT_CLEAR.

Statement: "{statement}"

No web evidence could be gathered for this statement. Answer from your general knowledge.

Please provide:
1. A verdict (TRUE, FALSE, PARTIALLY_TRUE, or CONTEXT_NOT_CLEAR)
2. A detailed explanation of your reasoning
3. Sources that support your conclusion with URLs, numbered from 1
4. A confidence between 0.0 and 1.0

{response_format}"""

# Schema handed to the provider when schema-guided generation is enabled
VERDICT_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "verdict": {
            "type": "string",
            "enum": ["TRUE", "FALSE", "PARTIALLY_TRUE", "CONTEXT_NOT_CLEAR", "UNKNOWN"],
        },
        "explanation": {"type": "string"},
        "sources": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "index": {"type": "integer"},
                    "name": {"type": "string"},
                    "url": {"type": "string"},
                },
                "required": ["index", "name", "url"],
            },
        },
        "confidence": {"type": "number"},
    },
    "required": ["verdict", "explanation", "sources", "confidence"],
}

# ============================================================================
# TRENDING TOPIC PROMPTS
# ============================================================================

TRENDING_TOPICS_FOR_QUERY_PROMPT = """Generate 5-8 fact-check worthy statements or questions related to "{query}" \
that might be trending or of interest to users.
Focus on topics that people might want to verify the factual accuracy of.
Return ONLY a valid JSON array of strings containing the questions, without ANY additional text, \
explanation or formatting.
IMPORTANT: Your response must be a valid parseable JSON array like this: \
["Question 1?", "Question 2?", "Is claim X true?"]"""

TRENDING_TOPICS_PROMPT = """Generate 8-10 fact-check worthy statements or questions that are currently trending \
or would be of high interest.
Include a mix of science, health, politics, technology, and general knowledge topics.
Focus on topics that people might want to verify the factual accuracy of.
Return ONLY a valid JSON array of strings containing questions, without ANY additional text, \
explanation or formatting.
IMPORTANT: Your response must be a valid parseable JSON array like this: \
["Question 1?", "Question 2?", "Is claim X true?"]"""

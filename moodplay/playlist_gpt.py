from openai import OpenAI
from jsonschema import validate, ValidationError
from datetime import date
import json
import re
import logging

from .models import SongCandidate
from .prompts import TRENDING_CONTEXT, SONG_CANDIDATES_PROMPT, SEARCH_QUERIES_PROMPT
from .fallbacks import fallback_songs, fallback_queries


logger = logging.getLogger(__name__)

MAX_SONG_CANDIDATES = 8
MAX_SEARCH_QUERIES = 12

song_candidate_schema = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "pattern": r"\S"},
        "artist": {"type": "string", "pattern": r"\S"},
    },
    "required": ["title", "artist"],
}

search_query_schema = {"type": "string", "pattern": r"\S"}

CODE_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)
TRAILING_COMMA = re.compile(r",\s*([\]}])")
QUOTE_REPLACEMENTS = {
    "“": '"', "”": '"', "„": '"', "″": '"',
    "‘": "'", "’": "'", "‚": "'", "′": "'",
}


class CandidateParseError(ValueError):
    pass


def create_openai_client(api_key, timeout=None):
    return OpenAI(api_key=api_key, timeout=timeout, max_retries=0)


def gpt_calling(client, prompt, model="gpt-4o-mini", temperature=0.9, max_tokens=1000):

    response = client.chat.completions.create(
        model=model,
        messages=[
            {
                "role": "user",
                "content": [
                    {
                        "type": "text",
                        "text": prompt
                    }
                ]
            }
        ],
        temperature=temperature,
        max_tokens=max_tokens
    )

    return response.choices[0].message.content


def build_trending_block(country=None):
    global_context = TRENDING_CONTEXT["global"]
    lines = [
        f"- Global Viral: {global_context['viral']}",
        f"- TikTok Popular: {global_context['tiktok']}",
        f"- Major Albums: {global_context['albums']}",
    ]
    if country:
        regional = TRENDING_CONTEXT["regional"].get(country, global_context["viral"])
        lines.append(f"- {country} Regional: {regional}")
    return "\n".join(lines)


def build_generation_prompt(prompt, base_prompt_template, country=None, today=None):
    """
    Build the input prompt for candidate generation.

    Args:
        prompt (str): the user's mood or activity description
        base_prompt_template (str): template with [DATE], [TRENDING] and [USER_PROMPT] placeholders
        country (str, optional): region code used to pick the regional trending hint
        today (date, optional): date shown to the model, defaults to today

    Returns:
        str: The final prompt ready for the text model.
    """
    today = today or date.today()
    return (
        base_prompt_template
        .replace("[DATE]", today.strftime("%B %d, %Y"))
        .replace("[TRENDING]", build_trending_block(country))
        .replace("[USER_PROMPT]", prompt)
    )


def _repair_stages(text):
    # curly quotes inside values are legal, only normalise them if commas were not enough
    without_commas = TRAILING_COMMA.sub(r"\1", text)
    yield without_commas
    for bad, good in QUOTE_REPLACEMENTS.items():
        without_commas = without_commas.replace(bad, good)
    yield TRAILING_COMMA.sub(r"\1", without_commas)


def _loads_with_repair(json_string):
    try:
        return json.loads(json_string)
    except json.JSONDecodeError as e:
        error = e

    for repaired in _repair_stages(json_string):
        try:
            return json.loads(repaired)
        except json.JSONDecodeError as e:
            error = e

    raise CandidateParseError(f"Invalid JSON format: {error}") from error


def extract_json_array(response):
    """
    Pull the JSON array out of a free-text model reply.

    Code fences are stripped and everything between the first "[" and the last "]"
    is parsed. A failed parse gets one repair pass: trailing commas are dropped first, and
    curly quotes are normalised only if that is not enough.

    Raises:
        CandidateParseError: no array in the reply, or it is still invalid after repair.
    """
    cleaned = CODE_FENCE.sub("", (response or "").strip())

    start = cleaned.find("[")
    end = cleaned.rfind("]")
    if start == -1 or end == -1 or end < start:
        raise CandidateParseError("No JSON array found in response")

    json_string = cleaned[start:end + 1]
    data = _loads_with_repair(json_string)

    if not isinstance(data, list):
        raise CandidateParseError("Response JSON is not an array")
    return data


def _valid(element, schema):
    try:
        validate(instance=element, schema=schema)
    except ValidationError:
        return False
    return True


def parse_song_candidates(response, max_count=MAX_SONG_CANDIDATES):
    """
    Turn a model reply into at most max_count distinct SongCandidates.
    Invalid elements are dropped; an empty result is an error.
    """
    candidates = []
    seen = set()
    for element in extract_json_array(response):
        if not _valid(element, song_candidate_schema):
            continue
        candidate = SongCandidate(title=element["title"].strip(), artist=element["artist"].strip())
        key = (candidate.title.lower(), candidate.artist.lower())
        if key in seen:
            continue
        seen.add(key)
        candidates.append(candidate)

    if not candidates:
        raise CandidateParseError("No valid songs in response")
    return candidates[:max_count]


def parse_search_queries(response, max_count=MAX_SEARCH_QUERIES):
    queries = []
    seen = set()
    for element in extract_json_array(response):
        if not _valid(element, search_query_schema):
            continue
        query = element.strip()
        if query.lower() in seen:
            continue
        seen.add(query.lower())
        queries.append(query)

    if not queries:
        raise CandidateParseError("No valid search queries in response")
    return queries[:max_count]


def _generate(client, prompt, country, template, parse, fallback, **gpt_kwargs):
    generation_prompt = build_generation_prompt(prompt, template, country)
    try:
        response = gpt_calling(client, generation_prompt, **gpt_kwargs)
        logger.info("Generation response: %s", (response or "")[:300])
        return parse(response)
    except CandidateParseError as e:
        logger.warning("Unusable generation response for '%s': %s. Using fallback list", prompt, e)
    except Exception as e:
        logger.warning("Generation call failed for '%s': %s. Using fallback list", prompt, e)
    return fallback(prompt, country)


def generate_song_candidates(client, prompt, country=None, **gpt_kwargs):
    """
    Ask the text model for song ideas matching the prompt.

    Never raises: any failure of the call or of the reply parsing falls back to the
    static tables in fallbacks.py, so the result is never empty.

    Args:
        client (OpenAI): text generation client
        prompt (str): user's mood or activity description
        country (str, optional): region code
        gpt_kwargs: model, temperature, max_tokens forwarded to gpt_calling

    Returns:
        list[SongCandidate]
    """
    return _generate(client, prompt, country, SONG_CANDIDATES_PROMPT,
                     parse_song_candidates, fallback_songs, **gpt_kwargs)


def generate_search_queries(client, prompt, country=None, **gpt_kwargs):
    """
    Same as generate_song_candidates but returns raw YouTube search strings.
    """
    return _generate(client, prompt, country, SEARCH_QUERIES_PROMPT,
                     parse_search_queries, fallback_queries, **gpt_kwargs)

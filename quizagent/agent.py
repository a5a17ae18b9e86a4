"""ReAct-style quiz creator agent: talks to a chat model and drives its tools."""

from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import requests
from dotenv import load_dotenv

from quizagent.models import Message, QuestionSet, RequestBody
from quizagent.web_search import duckduckgo_search

log = logging.getLogger(__name__)

LLM_ENDPOINT_URL = "https://api.groq.com/openai/v1/chat/completions"
CONTEXT_FILE = "conversation.json"
DEFAULT_USER_INPUT = "akbar"
_TIMEOUT = 60

_JSON_FORMAT_HINT = (
    '. JSON string should be in this format: {"topic": [topic_name], '
    '"questions": [{question},{question},..]}\n'
    "(Disclaimer: do not use curly quotes, and the JSON string should be in the single line)"
)

_EMPTY_FIELDS_HINT = (
    "The generated questions have some empty fields, recheck them and generate "
    "again without empty fields.\n"
    'Each question must be a JSON object with these exact fields:{"QuestionId": [integer],'
    '"Ques": "[clear, specific question]",\n'
    '"OptionA": "[first option]","OptionB": "[second option]","OptionC": "[third option]",'
    '"OptionD": "[fourth option]",\n'
    '"Answer": "[complete correct answer text matching one of the options exactly]"}'
)

JSON_CREATED = "json file created successfully, now you can give the Final Answer"

SYSTEM_PROMPT = """You are a Quiz Creator AI agent. You analyse the user input, research about it and then generate relevant high quality questions.

Process:
1. Analyse the user's input to identify the core topics related to it and then decide the one word queries.
2. Gather enough information about the topics and related topics related to the queries, using tools
**(first decide the one word query terms related to the user input and use web_search tool to gather basic the information about each query,
then use llm_search to to get more info to deepen the reseach)**.
3. Build a good and complete understanding of the topic and related topics with the help of the gathered information
4. Generate the quiz questions accordingly in the specified format and save it in a json file.
4. If you get any error in creating the json file, then analyse the error, think about why is it happening and what can you change in your json string to remove the error.

Question Format:
Each question must be a JSON string with these exact fields in single line:
{
	"QuestionId": [integer],
	"Ques": "[clear, specific question]",
	"OptionA": "[first option]",
	"OptionB": "[second option]",
	"OptionC": "[third option]",
	"OptionD": "[fourth option]",
	"Answer": "[complete correct answer text matching one of the options exactly]"
}
for example,
{
	"QuestionId": 1,
	"Ques": "What is a qubit?",
	"OptionA": "A bit that can be either 0 or 1.",
	"OptionB": "A bit that can exist in multiple states simultaneously.",
	"OptionC": "A physical wire used to transmit quantum data.",
	"OptionD": "A type of classical computer.",
	"Answer": "A bit that can exist in multiple states simultaneously."
}

Available Tools:
1. Tool: web_search
- Purpose: Returns a summary related to a general topic.
- Input format: A single word or a short keyword (e.g., "gravity", "Earth").
- Do NOT use full sentences or detailed questions.

2. Tool: llm_search
- Purpose: Retrieves specific and detailed information about any topic.
- Input format: A complete query or descriptive sentence (e.g., "Explain quantum entanglement", "Why did the Mughal Empire decline?").

3. Tool: json_file_creator
- Purpose: Creates a JSON file containing quiz questions.
- Input format: A single-line JSON string in this format:
{"topic": "Topic Name", "questions": [{question1}, {question2}, ...]}
- Rules:
	- Use only straight quotes (") \u2014 no curly quotes (\u201c or \u201d)
	- Keep the entire JSON on a single line (no line breaks or indentation)
	- Ensure the JSON is valid and properly formatted
Follow these formats exactly when calling the tools.

You MUST think in this format:
Thought: [your reasoning about what to do next]
Action: tool_name
Action Input: tool_Input_format

**IMPORTANT: After Action Input, DO NOT GENERATE anything else.
DO NOT write "Observation:". The system will provide the observation.
You MUST STOP after Action Input.**
ALWAYS WAIT FOR OBSERVATION

After receiving the observation, continue:
Thought: [reasoning about the observation]
Action: [Next action if needed]

You can continue this cycle as most 10 times or until you are satisfied that you have enough information to perform the task successfully

Final Output:
When task is complete, provide:
Final Answer: [Task Successful/Unsuccessful - with brief explanation]

Remember:
-Always start with a Thought before taking any Action.
-Try to use multiple tools before deciding to generate the questions.
-Do Not try more that 10 times when stuck.
-Always recheck and re-evaluate the questions for correct format and presence of all the fields.
-Always try gathering enough information about the topic before generating the questions."""


@dataclass(frozen=True)
class ParsedResponse:
    """The labelled lines of a model reply."""

    thought: str = ""
    action: str = ""
    action_input: str = ""
    final_result: str = ""


class LLMError(RuntimeError):
    """The model endpoint answered with an error instead of a completion."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code


_PREFIXES = (
    ("Thought: ", "thought"),
    ("Action: ", "action"),
    ("Action Input: ", "action_input"),
    ("Final Result: ", "final_result"),
)


def parse_response(content: str) -> ParsedResponse:
    """Pick out the Thought, Action, Action Input and Final Result lines; later lines win."""
    found: dict[str, str] = {}
    for line in content.split("\n"):
        for prefix, name in _PREFIXES:
            if line.startswith(prefix):
                found[name] = line[len(prefix):]
                break
    return ParsedResponse(**found)


def _dump_json(data: Any) -> str:
    """Indent with one space and escape the characters that are unsafe inside HTML."""
    text = json.dumps(data, indent=1, ensure_ascii=False)
    for char, escaped in (
        ("&", "\\u0026"),
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escaped)
    return text


def read_context_file(filename: str | os.PathLike[str]) -> list[Message]:
    """Load the saved conversation; raises OSError or ValueError."""
    data = json.loads(Path(filename).read_bytes())
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(
            f"conversation must be a JSON array, got {type(data).__name__}"
        )
    return [Message.from_dict(item) for item in data]


def write_context_file(
    filename: str | os.PathLike[str], messages: Iterable[Message]
) -> None:
    """Save the conversation as indented JSON."""
    text = _dump_json([message.to_dict() for message in messages])
    Path(filename).write_text(text, encoding="utf-8")


def _api_key() -> str:
    dotenv = Path(".env")
    if dotenv.is_file():
        load_dotenv(dotenv_path=dotenv)
    else:
        log.warning(".env not found!")
    return os.environ.get("LLM_API_KEY", "")


def llm_call(messages: Iterable[Message]) -> dict[str, Any]:
    """Send the conversation to the chat-completion endpoint and return the decoded reply."""
    body = RequestBody(messages=list(messages)).to_dict()
    headers = {
        "Content-Type": "application/json",
        "Authorization": "Bearer " + _api_key(),
    }
    response = requests.post(
        LLM_ENDPOINT_URL,
        data=json.dumps(body).encode("utf-8"),
        headers=headers,
        timeout=_TIMEOUT,
    )
    with response:
        try:
            result = response.json()
        except ValueError:
            return {}
    return result if isinstance(result, dict) else {}


def convert_llm_result(result: Mapping[str, Any]) -> Message:
    """Extract the first choice's message; raises LLMError carrying the error code."""
    choices = result.get("choices")
    if isinstance(choices, list) and choices:
        first = choices[0]
        if not isinstance(first, Mapping) or not isinstance(
            first.get("message"), Mapping
        ):
            raise ValueError("malformed completion: choice has no message")
        message = first["message"]
        role, content = message.get("role"), message.get("content")
        if not isinstance(role, str) or not isinstance(content, str):
            raise ValueError("malformed completion: role and content must be strings")
        return Message(role=role, content=content)

    error = result.get("error")
    code = error.get("code") if isinstance(error, Mapping) else None
    if not isinstance(code, str):
        raise LLMError("unexpected response without choices or error code")
    raise LLMError(code)


def create_json(file_data: str) -> str:
    """Validate the questions and save them as <topic>.json; the outcome comes back as text."""
    try:
        question_set = QuestionSet.from_json(file_data)
    except ValueError as err:
        return f"{err}{_JSON_FORMAT_HINT}"

    if any(question.has_empty_fields() for question in question_set.questions):
        return _EMPTY_FIELDS_HINT + _JSON_FORMAT_HINT

    text = _dump_json([question.to_dict() for question in question_set.questions])
    try:
        Path(question_set.topic + ".json").write_text(text, encoding="utf-8")
    except OSError as err:
        return str(err)
    return JSON_CREATED


def _ask(messages: list[Message]) -> Message:
    return convert_llm_result(llm_call(messages))


def _use_tool(action: str, action_input: str) -> str:
    if "web_search" in action:
        print("USING WEB SEARCH TOOL")
        return duckduckgo_search(action_input)
    if "json_file_creator" in action:
        print("USING JSON FILE CREATOR TOOL")
        return create_json(action_input)
    if "llm_search" in action:
        print("USING LLM SEARCH TOOL")
        query = Message(role="user", content="Answer this query in brief: " + action_input)
        return _ask([query]).content
    print("NO TOOL SELECTED")
    return "try using the tools"


def run_agent(
    user_input: str = DEFAULT_USER_INPUT,
    context_file: str | os.PathLike[str] = CONTEXT_FILE,
) -> list[Message]:
    """Run the thought/action/observation loop until the model gives its final answer."""
    messages = read_context_file(context_file)
    messages.append(Message(role="system", content=SYSTEM_PROMPT))
    messages.append(Message(role="user", content=user_input))

    received = _ask(messages)
    print(received.content)
    messages.append(received)
    write_context_file(context_file, messages)

    parsed = parse_response(received.content)
    found = "Final Answer" in received.content

    while not found:
        print("TRYING TO USE THE TOOLS")
        observation = _use_tool(parsed.action, parsed.action_input)
        observation_message = Message(
            role="assistant",
            content="Observation: "
            + (observation or "no obersvations, try again..."),
        )
        messages.append(observation_message)
        print(observation_message.content)

        received = _ask(messages)
        print(received.content)
        found = "Final Answer" in received.content
        messages.append(received)
        parsed = parse_response(received.content)

    write_context_file(context_file, messages)
    return messages


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="quizagent", description="Research a topic and generate a quiz file."
    )
    parser.add_argument(
        "topic", nargs="?", default=DEFAULT_USER_INPUT, help="what the quiz is about"
    )
    parser.add_argument(
        "--context",
        default=CONTEXT_FILE,
        help="conversation file to read and update (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        run_agent(args.topic, args.context)
    except requests.RequestException as err:
        print("Error calling LLM", err)
        return 1
    except (OSError, ValueError, LLMError) as err:
        print(err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
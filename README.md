# quizagent

`quizagent` is a small ReAct-style agent that turns a topic into a
multiple-choice quiz. It sends the conversation to a Groq
chat-completions endpoint, using the `llama3-8b-8192` model with replies
capped at 256 tokens. The model works in a `Thought` / `Action` /
`Action Input` loop and can use three tools:

- `web_search` looks a keyword up with the DuckDuckGo instant-answer API.
  It fetches the linked article and returns a short summary of its longer
  sentences.
- `llm_search` sends the query to the model as a separate one-message
  request ("Answer this query in brief: ...") and returns the reply.
- `json_file_creator` checks a JSON payload of questions and writes them to
  `<topic>.json`.

Each tool's result goes back to the model as an `Observation:` message.
The loop ends when a model reply contains `Final Answer`.

## Installation

```
pip install .
```

To install the test dependencies too and run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The API key comes from the `LLM_API_KEY` environment variable. If a
`.env` file is present in the working directory, it is loaded first. If
it is not, a warning is logged.

```
LLM_API_KEY=placeholder
```

Earlier conversation turns are read from a JSON context file, which is
`conversation.json` by default. The file must already exist and contain
a JSON list of `{"role": ..., "content": ...}` objects. Use `[]` to start
fresh. The conversation is written back to this file twice:

- after the model's first reply;
- again, in full, when the loop ends.

## Usage

```
quizagent [TOPIC] [--context FILE]
```

- `TOPIC` is the user request sent to the model. It defaults to `akbar`.
- `--context FILE` names the conversation file to read and update. It
  defaults to `conversation.json`.

The command prints each model reply, each tool it uses and each
observation while the agent works. Once the model has produced valid
questions, they are saved in the current working directory as
`<topic>.json`. The exit status is 1 in any of these cases:

- the request fails;
- the context file cannot be read;
- the endpoint returns an error instead of a completion.

## Library use

```python
from quizagent.agent import parse_response, create_json, run_agent
from quizagent.web_search import duckduckgo_search, naive_summarize

parsed = parse_response("Thought: look it up\nAction: web_search\nAction Input: gravity")
print(parsed.action, parsed.action_input)

print(duckduckgo_search("gravity"))
```

Module `quizagent.agent`:

- `parse_response(content)` returns a `ParsedResponse` with fields
  `thought`, `action`, `action_input` and `final_result`. If a label
  appears on more than one line, the last one wins.
- `create_json(file_data)` takes the single-line JSON string the model
  produces, `{"topic": "...", "questions": [...]}`. It returns an
  observation string that either confirms the file was written or
  explains what to fix: invalid JSON, or a question with an empty text,
  option or answer.
- `llm_call(messages)` posts the conversation and returns the decoded
  reply.
- `convert_llm_result(result)` extracts the first choice as a `Message`.
  It raises `LLMError`, carrying the error code, when the endpoint
  returned an error.
- `read_context_file(filename)` and `write_context_file(filename, messages)`
  load and save the conversation.
- `run_agent(user_input, context_file)` runs the whole loop for one
  request and returns the list of messages.

Module `quizagent.models` holds the dataclasses `Question`,
`QuestionSet`, `Message`, `RequestBody` and `DDGSearchResult`.

Module `quizagent.web_search` provides:

- `fetch_main_text_from_url(url)`
- `naive_summarize(text, max_sentences)`
- `duckduckgo_search(query)`

## Limitations

- The agent loop has no iteration limit. It keeps calling the model until
  a reply contains `Final Answer`.
- The endpoint URL and the model cannot be set from the command line.
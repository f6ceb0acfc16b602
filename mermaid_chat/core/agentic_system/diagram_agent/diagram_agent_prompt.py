"""
Diagram agent prompts.

Prompt templates for the two ways a diagram is requested: a running chat
conversation, and a single description with earlier messages as context.
Both ask for raw Mermaid only; replies are still normalized afterwards.

Dependencies: langchain_core.prompts
System role: Prompt templates for diagram generation
"""

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from mermaid_chat.models.diagram import ChatMessage, MessageRole

DEFAULT_REQUEST = "Create a simple flowchart"

CONVERSATION_INSTRUCTIONS = """You are a Mermaid diagram generator. You help users create diagrams based on their descriptions.

IMPORTANT CONTEXT:
{system_context}

IMPORTANT RULES:
1. Respond ONLY with raw Mermaid code.
2. Include NO explanations, markdown formatting, or code blocks (no ```).
3. Ensure the diagram has a valid Mermaid declaration at the start (flowchart, sequenceDiagram, etc).
4. Use proper syntax with nodes and connections.
5. For flowcharts, prefer "flowchart" over "graph" syntax.
6. Maintain conversation context - if the user refers to previous requests, update diagrams accordingly.

VALID EXAMPLES:
Example 1 - Flowchart:
flowchart TD
    A[Start] --> B[Process]
    B --> C[End]

Example 2 - Sequence Diagram:
sequenceDiagram
    Alice->>John: Hello John, how are you?
    John->>Alice: Great!

Reply with ONLY the diagram code based on the full conversation context:"""

CONVERSATION_PROMPT = ChatPromptTemplate.from_messages([
    MessagesPlaceholder("history", optional=True),
    ("human", CONVERSATION_INSTRUCTIONS + '\n\nUser\'s request: "{request}"'),
])

DESCRIPTION_PROMPT = ChatPromptTemplate.from_messages([
    ("human", """{context}Create a mermaid diagram based on the following description:
"{description}"

Return ONLY the mermaid code without any explanation, markdown formatting, or backticks.
The code should be valid mermaid syntax and should be as detailed as possible.

Follow these syntax rules precisely:
1. Always start with a diagram type declaration like 'flowchart TD', 'sequenceDiagram', 'classDiagram', etc.
2. For flowcharts, always use proper node connections with arrows like '-->'.
3. Use double quotes around ALL node text, especially when it contains spaces.
4. Avoid using special characters like quotes within node text; escape them if necessary.
5. Each node connection should be on a separate line.
6. Use proper syntax for node shapes and styles.
7. Test your syntax mentally before returning it to make sure it's valid.

Example of correct syntax:
flowchart TD
  A["Start"] --> B["Process Data"]
  B --> C["Make Decision"]
  C -->|Yes| D["Approve"]
  C -->|No| E["Reject"]"""),
])


def format_previous_messages(messages: list[ChatMessage]) -> str:
    """
    Flatten earlier messages into a plain-text context block.

    Args:
        messages: Earlier user and assistant messages

    Returns:
        str: Context block ending in a blank line, or "" when there is none
    """
    if not messages:
        return ""

    lines = ["Previous conversation and diagrams:"]
    for message in messages:
        speaker = "User" if message.role == MessageRole.USER else "Assistant"
        lines.append(f"{speaker}: {message.content}")
        if message.diagram:
            lines.append(f"Previous diagram code: {message.diagram}")
    return "\n".join(lines) + "\n\n"

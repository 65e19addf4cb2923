"""Rich rendering of API results for the CLI"""

from typing import List, Optional

from rich.table import Table

from copilot_api import Agent, ChatResponse, Embedding, Model


def show_agents(agents: List[Agent], console):
    """
    Display the agent catalog

    Args:
        agents: Agents returned by GET /agents
        console: Rich console for output
    """
    if not agents:
        console.print("[yellow]No agents available[/yellow]")
        return

    table = Table(title="Copilot Agents")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description")

    for agent in agents:
        table.add_row(agent.id, agent.name, agent.description or "")

    console.print(table)


def _optional(value: Optional[object]) -> str:
    return "-" if value is None else str(value)


def show_models(models: List[Model], console):
    """
    Display the model catalog

    Args:
        models: Models returned by GET /models
        console: Rich console for output
    """
    if not models:
        console.print("[yellow]No models available[/yellow]")
        return

    table = Table(title="Copilot Models")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Version")
    table.add_column("Tokenizer")
    table.add_column("Max Input", justify="right")
    table.add_column("Max Output", justify="right")

    for model in models:
        table.add_row(
            model.id,
            model.name,
            _optional(model.version),
            _optional(model.tokenizer),
            _optional(model.max_input_tokens),
            _optional(model.max_output_tokens),
        )

    console.print(table)


def show_chat_response(response: ChatResponse, console):
    """Print each choice with its finish reason and token usage"""
    if not response.choices:
        console.print("[yellow]No choices returned[/yellow]")
        return

    for idx, choice in enumerate(response.choices):
        if len(response.choices) > 1:
            console.print(f"[bold]Choice {idx}[/bold]")
        console.print(f"[bold cyan]{choice.message.role}:[/bold cyan] {choice.message.content}")

        details = []
        if choice.finish_reason:
            details.append(f"finish reason: {choice.finish_reason}")
        if choice.usage:
            details.append(f"total tokens: {choice.usage.total_tokens}")
        if details:
            console.print(f"[dim]{', '.join(details)}[/dim]")


def show_embeddings(inputs: List[str], embeddings: List[Embedding], console, preview: int = 5):
    """Show dimensionality and the first few values of each embedding"""
    table = Table(title="Embeddings")
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Input")
    table.add_column("Dimensions", justify="right")
    table.add_column("Preview")

    for embedding in embeddings:
        text = inputs[embedding.index] if embedding.index < len(inputs) else ""
        values = ", ".join(f"{v:.4f}" for v in embedding.embedding[:preview])
        if len(embedding.embedding) > preview:
            values += ", ..."
        table.add_row(str(embedding.index), text, str(len(embedding.embedding)), f"[{values}]")

    console.print(table)

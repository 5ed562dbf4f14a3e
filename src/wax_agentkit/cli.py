"""
wax-agent command line.

Usage:
    wax-agent [OPTIONS] COMMAND [ARGS]...

Configuration comes from ``WAX_*`` environment variables or a ``.env`` file
(see :class:`wax_agentkit.config.WaxSettings`).
"""
from __future__ import annotations

import json
import time

import click
from rich.console import Console
from rich.table import Table

from .agent import WaxAgentToolkit
from .config import WaxSettings, get_settings
from .errors import WaxAgentError
from .formatting import extract_params, format_account_info
from .logging_utils import mask_key, setup_logging
from .operations import contract_list_actions, contract_list_tables, get_balance_other
from .types import Network

console = Console()

SYSTEM_PROMPT = (
    "You are a helpful agent that can interact onchain using the WAX Agent Toolkit. "
    "You are empowered to interact onchain using your tools. If there is a 5XX (internal) "
    "HTTP error code, ask the user to try again later. If someone asks you to do something "
    "you can't do with your currently available tools, you must say so, and encourage them "
    "to implement it. Be concise and helpful with your responses. Refrain from restating "
    "your tools' descriptions unless it is explicitly requested."
)

AUTONOMOUS_PROMPT = (
    "Be creative and do something interesting on the blockchain. "
    "Choose an action or set of actions and execute it that highlights your abilities."
)


def _require(settings: WaxSettings, include_llm: bool = False) -> None:
    missing = settings.missing_required(include_llm=include_llm)
    if missing:
        console.print("[red]Error: Required environment variables are not set[/red]")
        for name in missing:
            console.print(f"  {name}=your_{name.lower()}_here")
        raise SystemExit(1)


def _toolkit(ctx: click.Context) -> WaxAgentToolkit:
    settings: WaxSettings = ctx.obj["settings"]
    _require(settings)
    try:
        return WaxAgentToolkit.from_settings(settings)
    except WaxAgentError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option(package_name="wax-agentkit", message="%(prog)s %(version)s")
@click.option("--rpc-url", envvar="WAX_RPC_URL", help="Chain API endpoint")
@click.option("--network", type=click.Choice(["mainnet", "testnet"]), help="WAX network")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, rpc_url: str | None, network: str | None, verbose: bool):
    """WAX Agent Toolkit - blockchain tools for LLM agents."""
    ctx.ensure_object(dict)

    overrides: dict = {}
    if rpc_url:
        overrides["rpc_url"] = rpc_url
    if network:
        overrides["network"] = Network(network)
    # the cached settings stay unmodified
    settings = get_settings().model_copy(update=overrides)

    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose


@cli.command()
@click.pass_context
def status(ctx):
    """Show current configuration."""
    settings: WaxSettings = ctx.obj["settings"]

    console.print("\n[bold blue]WAX Agent Toolkit Status[/bold blue]\n")
    console.print(f"Account: [cyan]{settings.account_name or 'Not configured'}[/cyan]")
    if settings.private_key:
        console.print(f"Private Key: [green]{mask_key(settings.private_key)}[/green]")
    else:
        console.print("Private Key: [yellow]Not configured[/yellow]")
    console.print(f"Network: [cyan]{settings.network.value}[/cyan]")
    console.print(f"Chain ID: [cyan]{settings.resolved_chain_id()}[/cyan]")
    console.print(f"RPC URL: [cyan]{settings.rpc_url or f'auto ({settings.node_type.value} via NodePulse)'}[/cyan]")
    console.print(f"Model: [cyan]{settings.model}[/cyan]")
    console.print()


@cli.command()
@click.argument("account", required=False)
@click.option("--contract", help="Token contract, e.g. eosio.token")
@click.option("--symbol", help="Token symbol, e.g. WAX")
@click.pass_context
def balance(ctx, account: str | None, contract: str | None, symbol: str | None):
    """Show the balance of ACCOUNT (defaults to the configured account)."""
    toolkit = _toolkit(ctx)
    target = account or toolkit.account_name
    try:
        result = get_balance_other(toolkit, target, contract, symbol)
    except WaxAgentError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise SystemExit(1)
    console.print(f"{target}: [yellow]{result}[/yellow]")


@cli.command()
@click.argument("account", required=False)
@click.pass_context
def account(ctx, account: str | None):
    """Show account information."""
    toolkit = _toolkit(ctx)
    try:
        info = toolkit.get_account(account)
    except WaxAgentError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise SystemExit(1)
    console.print(format_account_info(info))


@cli.command()
@click.argument("contract")
@click.pass_context
def actions(ctx, contract: str):
    """List the actions of CONTRACT and their parameters."""
    toolkit = _toolkit(ctx)
    try:
        result = contract_list_actions(toolkit, contract)
    except WaxAgentError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise SystemExit(1)

    if not result:
        console.print(f"[dim]No actions found for {contract}[/dim]")
        return

    table = Table(title=f"{contract} actions")
    table.add_column("Action", style="cyan")
    table.add_column("Type")
    table.add_column("Required", style="green")
    table.add_column("Optional", style="yellow")
    for action in result:
        params = extract_params(action.get("ricardian_contract"))
        table.add_row(
            action.get("name", ""),
            action.get("type", ""),
            ", ".join(k for k, v in params.items() if v == "required"),
            ", ".join(k for k, v in params.items() if v == "optional"),
        )
    console.print(table)


@cli.command()
@click.argument("contract")
@click.pass_context
def tables(ctx, contract: str):
    """List the tables of CONTRACT."""
    toolkit = _toolkit(ctx)
    try:
        result = contract_list_tables(toolkit, contract)
    except WaxAgentError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise SystemExit(1)

    if not result:
        console.print(f"[dim]No tables found for {contract}[/dim]")
        return

    table = Table(title=f"{contract} tables")
    table.add_column("Table", style="cyan")
    table.add_column("Row type")
    table.add_column("Index")
    for row in result:
        table.add_row(row.get("name", ""), row.get("type", ""), row.get("index_type", ""))
    console.print(table)


# -- Agent loops --------------------------------------------------------------


def build_agent(settings: WaxSettings, toolkit: WaxAgentToolkit):
    """Create a LangGraph ReAct agent wired with every WAX tool."""
    try:
        from langchain_openai import ChatOpenAI
        from langgraph.checkpoint.memory import MemorySaver
        from langgraph.prebuilt import create_react_agent
    except ImportError as e:
        raise click.ClickException(
            f"{e.name} is not installed. Install the agent extra: pip install 'wax-agentkit[agent]'"
        )

    from .langchain import WaxCallbackHandler, create_wax_tools

    llm = ChatOpenAI(
        model=settings.model,
        temperature=settings.temperature,
        api_key=settings.openai_api_key,
    )
    agent = create_react_agent(
        llm,
        create_wax_tools(toolkit),
        checkpointer=MemorySaver(),
        prompt=SYSTEM_PROMPT,
    )
    config = {
        "configurable": {"thread_id": "WAX Agent Toolkit!"},
        "callbacks": [WaxCallbackHandler()],
    }
    return agent, config


def _stream(agent, config, text: str) -> None:
    from langchain_core.messages import HumanMessage

    for chunk in agent.stream({"messages": [HumanMessage(content=text)]}, config):
        if "agent" in chunk:
            console.print(chunk["agent"]["messages"][0].content)
        elif "tools" in chunk:
            content = chunk["tools"]["messages"][0].content
            try:
                console.print_json(content)
            except (json.JSONDecodeError, TypeError):
                console.print(content)
        console.print("-------------------")


@cli.command()
@click.pass_context
def chat(ctx):
    """Chat with the agent. Type 'exit' to end."""
    settings: WaxSettings = ctx.obj["settings"]
    _require(settings, include_llm=True)
    agent, config = build_agent(settings, _toolkit(ctx))

    console.print("[bold blue]Starting chat mode... Type 'exit' to end.[/bold blue]")
    while True:
        user_input = click.prompt("\nPrompt", prompt_suffix=": ", default="", show_default=False)
        if user_input.strip().lower() == "exit":
            break
        if not user_input.strip():
            continue
        _stream(agent, config, user_input)


@cli.command()
@click.option("--interval", default=10, show_default=True, help="Seconds between actions")
@click.option("--max-iterations", type=int, default=None, help="Stop after this many rounds")
@click.pass_context
def auto(ctx, interval: int, max_iterations: int | None):
    """Let the agent act on its own at a fixed interval."""
    settings: WaxSettings = ctx.obj["settings"]
    _require(settings, include_llm=True)
    agent, config = build_agent(settings, _toolkit(ctx))

    console.print("[bold blue]Starting autonomous mode...[/bold blue]")
    iteration = 0
    while max_iterations is None or iteration < max_iterations:
        _stream(agent, config, AUTONOMOUS_PROMPT)
        iteration += 1
        if max_iterations is None or iteration < max_iterations:
            time.sleep(interval)


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()

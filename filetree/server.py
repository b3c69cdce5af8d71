from fastapi import FastAPI, WebSocket, WebSocketDisconnect, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
import logging
from typing import Any, Dict, List, Optional
from .config import Settings
from .editor import InlineEditor
from .file_operations import resolve_rename_target
from .fixtures import provision_demo_tree
from .models import FileNode
from .tree_manager import TreeManager
from .error_handling import (
    setup_logging,
    handle_error,
    log_operation,
    FileTreeError,
    FileOperationError,
    PathOutsideRootError
)

logger = logging.getLogger(__name__)

def resolve_node(manager: TreeManager, path: Optional[str]) -> FileNode:
    """Turn a client-supplied path into a node, refusing anything outside the root"""
    if not path:
        raise FileOperationError("Missing path")
    if not manager.provider.contains(path):
        raise PathOutsideRootError(f"Path is outside the browsed root: {path}",
                                   {"path": path, "root": manager.root})
    return FileNode(path)

def string_param(params: Dict[str, Any], key: str, default: Optional[str] = None) -> str:
    """Fetch a string command parameter, refusing missing or non-string values"""
    value = params.get(key, default)
    if not isinstance(value, str):
        raise FileOperationError(f"Parameter '{key}' must be a string",
                                 {"parameter": key, "received": type(value).__name__})
    return value

def node_list(nodes: List[FileNode]) -> List[Dict[str, Any]]:
    return [node.to_dict() for node in nodes]

def rename_node(manager: TreeManager, node: FileNode, new_name: str) -> Dict[str, Any]:
    target = resolve_rename_target(node.path, new_name)
    if not manager.provider.contains(target):
        raise PathOutsideRootError(f"Rename target is outside the browsed root: {target}",
                                   {"path": node.path, "target": target})
    result = node.rename(new_name)
    return {"result": result.to_dict(), "node": node.to_dict()}

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.provision_demo:
            provision_demo_tree(settings.root)
        logger.info("Serving file tree rooted at %s", settings.root)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.manager = TreeManager(settings.root)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        """Simple health check endpoint"""
        return {"status": "ok", "service": "filetree"}

    @app.get("/api/roots")
    def get_roots():
        return node_list(app.state.manager.provider.roots())

    @app.get("/api/children")
    def get_children(path: str):
        manager = app.state.manager
        try:
            node = resolve_node(manager, path)
        except PathOutsideRootError as e:
            raise HTTPException(status_code=403, detail=str(e))
        return node_list(manager.provider.sorted_children(node))

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        await websocket.accept()
        logger.debug("WebSocket connection accepted")
        manager = app.state.manager
        editor = InlineEditor()
        watcher = None

        async def push_change(change):
            await websocket.send_json(change)

        try:
            while True:
                command = None
                try:
                    data = await websocket.receive_json()
                    if not isinstance(data, dict):
                        raise FileOperationError("Message must be a JSON object")
                    command = data.get("command")
                    params = data.get("params", {})
                    if not isinstance(params, dict):
                        raise FileOperationError("params must be a JSON object",
                                                 {"params_type": type(params).__name__})
                    log_operation(logger, command, params)

                    if command == "get_roots":
                        payload = {"nodes": node_list(manager.provider.roots())}

                    elif command == "get_children":
                        node = resolve_node(manager, string_param(params, "path"))
                        payload = {
                            "path": node.path,
                            "nodes": node_list(manager.provider.sorted_children(node))
                        }

                    elif command == "rename":
                        node = resolve_node(manager, string_param(params, "path"))
                        payload = rename_node(manager, node, string_param(params, "newName"))

                    elif command == "begin_edit":
                        node = resolve_node(manager, string_param(params, "path"))
                        payload = {"path": node.path, "value": editor.begin_edit(node)}

                    elif command == "commit_edit":
                        node = editor.item
                        if node is None:
                            # Nothing open, e.g. the blur that follows an escape
                            payload = {"result": None}
                        else:
                            new_name = string_param(params, "value", "")
                            target = resolve_rename_target(node.path, new_name)
                            if not manager.provider.contains(target):
                                editor.cancel()
                                raise PathOutsideRootError(
                                    f"Rename target is outside the browsed root: {target}",
                                    {"path": node.path, "target": target})
                            result = editor.commit(new_name)
                            payload = {
                                "result": result.to_dict() if result else None,
                                "node": node.to_dict()
                            }

                    elif command == "cancel_edit":
                        editor.cancel()
                        payload = {"cancelled": True}

                    elif command == "watch_changes":
                        if watcher is None:
                            started = TreeManager(manager.root)
                            started.watch(push_change)
                            watcher = started
                        payload = {"watching": watcher.root}

                    else:
                        raise FileTreeError(f"Unknown command: {command}")

                    await websocket.send_json({"type": "success", "data": payload})

                except WebSocketDisconnect:
                    raise
                except Exception as e:
                    await websocket.send_json(
                        handle_error(logger, e, command or "websocket_communication")
                    )

        except WebSocketDisconnect:
            logger.debug("WebSocket client disconnected")
        finally:
            if watcher is not None:
                watcher.stop()
            logger.info("WebSocket connection closed")

    return app

def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)
    print(f"Starting server on http://{settings.host}:{settings.port}")
    print(f"WebSocket endpoint at ws://{settings.host}:{settings.port}/ws")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()

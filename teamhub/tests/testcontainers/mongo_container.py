import json
import logging
import time

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from testcontainers.core.generic import DockerContainer
from testcontainers.core.waiting_utils import wait_for_logs

logger = logging.getLogger(__name__)


class MongoReplicaSetContainer(DockerContainer):
    """Single-node MongoDB replica set, so tests run against the same topology as production."""

    def __init__(self, image: str = "mongo:6.0", replica_set: str = "rs0"):
        super().__init__(image=image)
        self.replica_set = replica_set
        self.with_exposed_ports(27017)
        self.with_command(["mongod", "--replSet", replica_set, "--bind_ip_all"])
        self._mongo_url = None

    def start(self):
        super().start()
        wait_for_logs(self, r"Waiting for connections", timeout=30)

        initiate_config = json.dumps({"_id": self.replica_set, "members": [{"_id": 0, "host": "localhost:27017"}]})
        exit_code, output = self.exec(["mongosh", "--quiet", "--eval", f"rs.initiate({initiate_config})"])
        if exit_code != 0:
            raise RuntimeError(
                f"rs.initiate() failed (exit code {exit_code}):\n{output.decode('utf-8', errors='ignore')}"
            )

        host = self.get_container_host_ip()
        port = self.get_exposed_port(27017)
        self._mongo_url = f"mongodb://{host}:{port}/?directConnection=true"
        self._wait_for_primary()
        return self

    def get_connection_url(self) -> str:
        return self._mongo_url

    def _wait_for_primary(self, timeout=15):
        client = MongoClient(self.get_connection_url())
        deadline = time.time() + timeout
        try:
            while time.time() < deadline:
                try:
                    if client.admin.command("hello").get("isWritablePrimary", False):
                        return
                except PyMongoError as e:
                    logger.debug(f"Waiting for PRIMARY: {e}")
                time.sleep(0.5)
        finally:
            client.close()
        raise TimeoutError("Timed out waiting for replica set to become PRIMARY")

"""Check that the Mapping Store table is reachable from your local machine

Connection details are read from the environment:
- TABLE_NAME: name of the URL mapping table
- LOCALSTACK_ENDPOINT: e.g. http://localhost:4566 (with APP_ENV=local)

Expect to see "Table <name> is reachable" printed in your local console.
"""

from shortlinks.dao.dynamodb import UrlMappingDynamoDBDAO
from shortlinks.utils import load_config


def main():
    config = load_config()
    dao = UrlMappingDynamoDBDAO(table_name=config.table_name, endpoint_url=config.endpoint_url)

    dao._healthcheck()
    print(f'Table {config.table_name} is reachable')


if __name__ == '__main__':
    main()

"""GraphQL documents sent to the ShipHero public API.

User-supplied values always travel as variables; nothing is interpolated
into the documents themselves.
"""

WAREHOUSE_PRODUCTS = """
query GetWarehouseProducts(
  $customer_account_id: String
  $warehouse_id: String
  $sku: String
  $first: Int
  $after: String
) {
  warehouse_products(
    customer_account_id: $customer_account_id
    warehouse_id: $warehouse_id
    sku: $sku
    active: true
    first: $first
    after: $after
  ) {
    request_id
    complexity
    data {
      edges {
        node {
          id
          legacy_id
          sku
          warehouse_id
          warehouse_identifier
          on_hand
          inventory_bin
          active
          product {
            name
            barcode
          }
          locations {
            location_id
            location_name
            quantity
            pickable
          }
        }
        cursor
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

ACCOUNT_WAREHOUSES = """
query GetAccountWarehouses {
  account {
    request_id
    complexity
    data {
      warehouses {
        id
        legacy_id
        identifier
        address {
          name
          city
          state
        }
      }
    }
  }
}
"""

CUSTOMER_UUID = """
query GetCustomerUUID($legacy_id: Int!) {
  uuid(legacy_id: $legacy_id, entity: CustomerAccount) {
    request_id
    data {
      legacy_id
      id
    }
  }
}
"""

GENERATE_ACCESS_TOKEN = """
mutation GenerateAccessToken($refresh_token: String!) {
  generateAccessToken(input: { refresh_token: $refresh_token }) {
    access_token
    errors {
      message
    }
  }
}
"""

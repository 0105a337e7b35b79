from enum import Enum

REST_API_LOGICAL_ID = "RestApiApigEvent"
DEPLOYMENT_LOGICAL_ID = "DeploymentApigEvent"
METHOD_LOGICAL_ID_INFIX = "MethodApigEvent"
API_KEY_LOGICAL_ID_PREFIX = "ApiKeyApigEvent"
PERMISSION_LOGICAL_ID_SUFFIX = "LambdaPermissionApigEvent"
AUTHORIZER_LOGICAL_ID_SUFFIX = "Authorizer"
ENDPOINT_OUTPUT_PREFIX = "Endpoint"

METHOD_RESOURCE_TYPE = "AWS::ApiGateway::Method"
API_KEY_RESOURCE_TYPE = "AWS::ApiGateway::ApiKey"
REST_API_RESOURCE_TYPE = "AWS::ApiGateway::RestApi"
DEPLOYMENT_RESOURCE_TYPE = "AWS::ApiGateway::Deployment"
PERMISSION_RESOURCE_TYPE = "AWS::Lambda::Permission"

LAMBDA_INVOCATION_PATH = ":lambda:path/2015-03-31/functions/"
EXECUTE_API_HOST_SUFFIX = "amazonaws.com"


# These are methods supported by api gateway
class HTTPMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    ANY = "ANY"


# Universal velocity template. Exposes
# `{body, method, principalId, headers, query, path, identity, stageVariables} = event`
# to the function as JSON objects.
DEFAULT_JSON_REQUEST_TEMPLATE = """
            #define( $loop )
              {
              #foreach($key in $map.keySet())
                  "$util.escapeJavaScript($key)":
                    "$util.escapeJavaScript($map.get($key))"
                    #if( $foreach.hasNext ) , #end
              #end
              }
            #end
            {
              "body": $input.json("$"),
              "method": "$context.httpMethod",
              "principalId": "$context.authorizer.principalId",

              #set( $map = $input.params().header )
              "headers": $loop,

              #set( $map = $input.params().querystring )
              "query": $loop,

              #set( $map = $input.params().path )
              "path": $loop,

              #set( $map = $context.identity )
              "identity": $loop,

              #set( $map = $stageVariables )
              "stageVariables": $loop
            }
          """
